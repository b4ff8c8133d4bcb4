"""
TapWatch · Runtime Settings

Reads configuration from the environment (and a local .env file):

    TAPWATCH_GATEWAY_URL       gateway base URL; unset = call providers directly
    TAPWATCH_REQUEST_TIMEOUT   seconds per upstream request (default 30)
    TAPWATCH_LOG_LEVEL         logging level name (default INFO)
    TAPWATCH_GATEWAY_HOST      gateway bind host (default 127.0.0.1)
    TAPWATCH_GATEWAY_PORT      gateway bind port (default 8000)
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from config.constants import DEFAULT_TIMEOUT_SECONDS
from data_fetch.gateway_client import GatewayClient
from data_fetch.upstream_client import UpstreamClient

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    gateway_url: Optional[str] = None
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"
    gateway_host: str = "127.0.0.1"
    gateway_port: int = 8000

    @classmethod
    def from_env(cls) -> "Settings":
        gateway_url = os.environ.get("TAPWATCH_GATEWAY_URL", "").strip() or None
        return cls(
            gateway_url=gateway_url.rstrip("/") if gateway_url else None,
            request_timeout=float(
                os.environ.get("TAPWATCH_REQUEST_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)
            ),
            log_level=os.environ.get("TAPWATCH_LOG_LEVEL", "INFO").upper(),
            gateway_host=os.environ.get("TAPWATCH_GATEWAY_HOST", "127.0.0.1"),
            gateway_port=int(os.environ.get("TAPWATCH_GATEWAY_PORT", "8000")),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def build_client(settings: Settings):
    """
    Return the provider client the dashboard should use.

    With a gateway URL configured, requests go through the gateway routes;
    otherwise the providers are called directly.
    """
    if settings.gateway_url:
        return GatewayClient(settings.gateway_url, timeout=settings.request_timeout)
    return UpstreamClient(timeout=settings.request_timeout)
