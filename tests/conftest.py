"""Shared fixtures: an in-memory provider client and sample payloads."""

import threading

import pytest


class FakeProviderClient:
    """Stands in for UpstreamClient / GatewayClient. Records every call."""

    def __init__(self, systems=None, contaminants=None, facility=None):
        self.systems = systems if systems is not None else {"systemList": []}
        self.contaminants = contaminants or {}
        self.facility = facility or {}
        self.calls = []
        self._lock = threading.Lock()

    def _record(self, name, arg):
        with self._lock:
            self.calls.append((name, arg))

    def _answer(self, value):
        if isinstance(value, Exception):
            raise value
        return value

    def get_systems(self, zip_code):
        self._record("systems", zip_code)
        return self._answer(self.systems)

    def get_contaminants(self, pwsid):
        self._record("contaminants", pwsid)
        return self._answer(self.contaminants.get(pwsid, {}))

    def get_facility(self, pwsid):
        self._record("facility", pwsid)
        return self._answer(self.facility.get(pwsid, []))


def contaminant(name, average, guideline, units="ppb", legal_limit=None, effect="Cancer"):
    return {
        "ContaminantName": name,
        "ContaminantEffect": effect,
        "ContaminantDisplayUnits": units,
        "SystemAverage": average,
        "ContaminantHGValue": guideline,
        "ContaminantMCLValue": legal_limit,
    }


@pytest.fixture
def beverly_hills_client():
    return FakeProviderClient(
        systems={"systemList": [{"PWS": "CA1910009", "SystemName": "Beverly Hills MWD"}]},
        contaminants={
            "CA1910009": {
                "information": {
                    # Provider placed both in "others"; the numbers say otherwise.
                    "exceedsList": [],
                    "othersList": [
                        contaminant("Arsenic", 12, 0.004, legal_limit=10),
                        contaminant("Chlorine", 0.5, 4, units="ppm", legal_limit=4),
                    ],
                }
            }
        },
        facility={
            "CA1910009": [{"pwsid": "CA1910009", "population_served_count": 34109, "primary_source_code": "SW"}]
        },
    )
