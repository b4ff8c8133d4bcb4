"""
TapWatch gateway: FastAPI pass-through routes.

Each route forwards one query parameter to one fixed provider URL and
returns the provider's JSON verbatim, or ``{"error": ...}`` on failure.

Usage:
    python -m gateway
    uvicorn gateway.app:app --port 8000
"""

import logging
from typing import Callable, Optional

import requests
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from config.constants import GATEWAY_ERRORS, GATEWAY_ROUTES
from data_fetch.errors import UpstreamUnavailableError
from data_fetch.upstream_client import UpstreamClient

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _forward(fetch: Callable, value: str, failure: str, label: str, pass_status: bool = False):
    try:
        return fetch(value)
    except UpstreamUnavailableError as e:
        logger.error("%s request failed for %s with status %s", label, value, e.status_code)
        if pass_status and e.status_code:
            return _error(e.status_code, GATEWAY_ERRORS["facility_status"].format(reason=e))
        return _error(500, failure)
    except (requests.RequestException, ValueError) as e:
        logger.error("Error fetching %s data for %s: %s", label, value, e)
        return _error(500, failure)


def create_app(upstream: Optional[UpstreamClient] = None) -> FastAPI:
    """Create the gateway application around a provider client."""

    app = FastAPI(
        title="TapWatch Gateway",
        description="Pass-through routes for EWG and EPA drinking-water data",
        version="0.1.0",
    )
    client = upstream or UpstreamClient()
    app.state.upstream = client

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get(GATEWAY_ROUTES["systems"])
    def get_systems(zip: Optional[str] = None):
        if not zip or not zip.strip():
            return _error(400, GATEWAY_ERRORS["missing_zip"])
        return _forward(client.get_systems, zip.strip(), GATEWAY_ERRORS["systems"], "EWG systems")

    @app.get(GATEWAY_ROUTES["contaminants"])
    def get_contaminants(pwsid: Optional[str] = None):
        if not pwsid or not pwsid.strip():
            return _error(400, GATEWAY_ERRORS["missing_pwsid"])
        return _forward(
            client.get_contaminants, pwsid.strip(), GATEWAY_ERRORS["contaminants"], "EWG contaminants"
        )

    @app.get(GATEWAY_ROUTES["facility"])
    def get_epa_data(pwsid: Optional[str] = None):
        if not pwsid or not pwsid.strip():
            return _error(400, GATEWAY_ERRORS["missing_pwsid"])
        return _forward(
            client.get_facility, pwsid.strip(), GATEWAY_ERRORS["facility"], "EPA Envirofacts",
            pass_status=True,
        )

    return app


app = create_app()
