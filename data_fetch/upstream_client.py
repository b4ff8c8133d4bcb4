"""
TapWatch · Provider Client

Fetches drinking-water data straight from the public providers.
- EWG Tap Water Database (Waterdrop API): water systems by zip, contaminants by PWSID
- EPA Envirofacts SDWIS: facility record (population, source) by PWSID
- No API key required

The gateway serves these same three calls over HTTP; the dashboard can also
use this client directly.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests

from config.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    EPA_WATER_SYSTEM_URL,
    EWG_INFORMATION_URL,
    EWG_SYSTEMS_URL,
)
from data_fetch.errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)


class UpstreamClient:
    """Client for the EWG and EPA Envirofacts endpoints."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "Cache-Control": "no-cache",
        })

    # -----------------------------------------------------------------
    # EWG: systems serving a zip code
    # -----------------------------------------------------------------
    def get_systems(self, zip_code: str) -> Dict:
        return self._get_json(EWG_SYSTEMS_URL, params={"zip": zip_code})

    # -----------------------------------------------------------------
    # EWG: contaminant information for one system
    # -----------------------------------------------------------------
    def get_contaminants(self, pwsid: str) -> Dict:
        return self._get_json(EWG_INFORMATION_URL, params={"pws": pwsid})

    # -----------------------------------------------------------------
    # EPA Envirofacts: WATER_SYSTEM rows for one PWSID
    # -----------------------------------------------------------------
    def get_facility(self, pwsid: str) -> Any:
        url = EPA_WATER_SYSTEM_URL.format(pwsid=quote(pwsid, safe=""))
        return self._get_json(url)

    def _get_json(self, url: str, params: Optional[Dict] = None) -> Any:
        """
        GET a provider URL and decode its JSON body.

        Non-success statuses raise ``UpstreamUnavailableError`` carrying the
        provider's status code. Transport errors from requests propagate.
        """
        resp = self.session.get(url, params=params, timeout=self.timeout)
        if not resp.ok:
            logger.error("Provider request to %s failed with status %s", url, resp.status_code)
            raise UpstreamUnavailableError(resp.reason or "Upstream error", status_code=resp.status_code)
        return resp.json()
