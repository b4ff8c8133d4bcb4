"""Run the gateway with uvicorn: ``python -m gateway``."""

import uvicorn

from config.settings import Settings, configure_logging
from data_fetch.upstream_client import UpstreamClient
from gateway.app import create_app


def main():
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app = create_app(UpstreamClient(timeout=settings.request_timeout))
    uvicorn.run(app, host=settings.gateway_host, port=settings.gateway_port)


if __name__ == "__main__":
    main()
