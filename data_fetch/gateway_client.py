"""
TapWatch · Gateway Client

Calls the TapWatch gateway routes instead of the providers. Same three
operations as ``UpstreamClient`` so the pipeline can use either.
"""

import logging
from typing import Any, Dict, Optional

import requests

from config.constants import DEFAULT_TIMEOUT_SECONDS, GATEWAY_ROUTES
from data_fetch.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class GatewayClient:
    """Client for a running TapWatch gateway."""

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def get_systems(self, zip_code: str) -> Dict:
        return self._get_json(GATEWAY_ROUTES["systems"], {"zip": zip_code})

    def get_contaminants(self, pwsid: str) -> Dict:
        return self._get_json(GATEWAY_ROUTES["contaminants"], {"pwsid": pwsid})

    def get_facility(self, pwsid: str) -> Any:
        return self._get_json(GATEWAY_ROUTES["facility"], {"pwsid": pwsid})

    def _get_json(self, route: str, params: Dict) -> Any:
        url = f"{self.base_url}{route}"
        resp = self.session.get(url, params=params, timeout=self.timeout)
        if not resp.ok:
            raise UpstreamUnavailableError(_error_message(resp), status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamUnavailableError(f"Invalid JSON from {route}: {e}") from e


def _error_message(resp: requests.Response) -> str:
    """Pull the gateway's ``{"error": ...}`` envelope, falling back to the reason."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return resp.reason or f"HTTP {resp.status_code}"
