"""
TapWatch · Report Pipeline Orchestrator

Zip code in, render-ready outcome out:
  1. discover the systems serving the zip
  2. for the chosen system, fetch facility details and contaminants together
  3. reclassify contaminants and assemble the report view

Failures are reduced here to one of a few user-visible messages. Facility
enrichment is soft-fail; everything else is hard-fail.
"""

import itertools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from analysis.guideline_comparison import ReportView, assemble_report
from config.constants import MESSAGES
from data_fetch.errors import MissingInputError, NoSystemsFoundError
from data_fetch.facility_enrichment import enrich
from data_fetch.system_discovery import discover_systems, split_primary
from models.exceedance_model import classify
from models.records import WaterSystem

logger = logging.getLogger(__name__)

STATUS_OK = "ok"
STATUS_MISSING_INPUT = "missing_input"
STATUS_NO_SYSTEMS = "no_systems"
STATUS_ERROR = "error"


def gather(tasks: Dict[str, Callable[[], Any]]) -> Dict[str, Any]:
    """
    Run a small fixed set of callables concurrently and wait for all of them.

    Returns results keyed like ``tasks``. The first exception raised by any
    task (in key order) is re-raised after every task has finished.
    """
    if not tasks:
        return {}
    with ThreadPoolExecutor(max_workers=len(tasks)) as pool:
        futures = {name: pool.submit(fn) for name, fn in tasks.items()}
    return {name: future.result() for name, future in futures.items()}


class RequestSequencer:
    """Monotonic request tokens: only the most recently issued one is current."""

    def __init__(self):
        self._counter = itertools.count(1)
        self._latest = 0
        self._lock = threading.Lock()

    def issue(self) -> int:
        with self._lock:
            self._latest = next(self._counter)
            return self._latest

    def is_current(self, token: int) -> bool:
        with self._lock:
            return token == self._latest


@dataclass(frozen=True)
class ReportOutcome:
    status: str
    message: Optional[str] = None
    report: Optional[ReportView] = None
    alternates: List[WaterSystem] = field(default_factory=list)
    zip_code: str = ""

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


class ReportPipeline:
    def __init__(self, client):
        self.client = client
        self.sequencer = RequestSequencer()

    def search(self, zip_code: str) -> Optional[ReportOutcome]:
        """
        Build the outcome for a zip code: primary report plus alternates.

        Returns None when a newer search or selection started before this
        one finished; the caller keeps showing the newer result.
        """
        token = self.sequencer.issue()
        zip_code = (zip_code or "").strip()
        try:
            systems = discover_systems(self.client, zip_code)
            primary, alternates = split_primary(systems)
            outcome = ReportOutcome(
                status=STATUS_OK,
                report=self.load_report(primary),
                alternates=alternates,
                zip_code=zip_code,
            )
        except MissingInputError:
            outcome = ReportOutcome(status=STATUS_MISSING_INPUT, message=MESSAGES["missing_zip"])
        except NoSystemsFoundError:
            outcome = ReportOutcome(
                status=STATUS_NO_SYSTEMS,
                message=MESSAGES["no_systems"].format(zip_code=zip_code),
                zip_code=zip_code,
            )
        except Exception:
            logger.exception("Report failed for zip %s", zip_code)
            outcome = ReportOutcome(status=STATUS_ERROR, message=MESSAGES["error"], zip_code=zip_code)
        return self._if_current(token, outcome)

    def select(
        self,
        system: WaterSystem,
        alternates: Optional[List[WaterSystem]] = None,
        zip_code: str = "",
    ) -> Optional[ReportOutcome]:
        """Re-run the full report for a system picked from the alternates."""
        token = self.sequencer.issue()
        try:
            outcome = ReportOutcome(
                status=STATUS_OK,
                report=self.load_report(system),
                alternates=list(alternates or []),
                zip_code=zip_code,
            )
        except Exception:
            logger.exception("Report failed for PWSID %s", system.identifier)
            outcome = ReportOutcome(status=STATUS_ERROR, message=MESSAGES["error"], zip_code=zip_code)
        return self._if_current(token, outcome)

    def _if_current(self, token: int, outcome: ReportOutcome) -> Optional[ReportOutcome]:
        if not self.sequencer.is_current(token):
            logger.info("Discarding superseded %s outcome (request %d)", outcome.status, token)
            return None
        return outcome

    def load_report(self, system: WaterSystem) -> ReportView:
        """Fetch, classify and assemble one system's report. Raises on hard failures."""
        results = gather({
            "facility": lambda: enrich(self.client, system.identifier),
            "contaminants": lambda: self.client.get_contaminants(system.identifier),
        })
        enriched = system.with_facility(results["facility"])

        information = _information(results["contaminants"])
        classified = classify(information.get("exceedsList"), information.get("othersList"))

        note = None
        if classified.is_empty:
            note = MESSAGES["no_contaminants"].format(system_name=enriched.display_name)
        logger.info(
            "PWSID %s: %d of %d contaminants exceed guidelines",
            system.identifier, len(classified.exceeding), classified.total,
        )
        return assemble_report(enriched, classified, note=note)


def _information(payload: Any) -> Dict:
    if not isinstance(payload, dict):
        return {}
    information = payload.get("information")
    return information if isinstance(information, dict) else {}
