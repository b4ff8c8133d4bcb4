"""
TapWatch · Facility Enrichment

Adds population served and source-water type from EPA Envirofacts.

Best effort only: a facility-data outage must never block the contaminant
report, so every failure falls back to "N/A" for both fields.
"""

import logging
from typing import Any, Mapping, Optional

from config.constants import FACILITY_FIELDS, NOT_AVAILABLE, SOURCE_WATER_TYPES
from models.records import FacilityDetails, parse_number

logger = logging.getLogger(__name__)


def enrich(client, system_id: str) -> FacilityDetails:
    """
    Look up facility details for a PWSID.

    Parameters
    ----------
    client : provider client
        Anything with ``get_facility(pwsid)``.
    system_id : str
        Public Water System ID.

    Returns
    -------
    FacilityDetails
        Defaults to ("N/A", "N/A") on any failure. Never raises.
    """
    if not system_id:
        return FacilityDetails()

    try:
        payload = client.get_facility(system_id)
    except Exception as e:
        logger.warning("Facility lookup failed for PWSID %s: %s", system_id, e)
        return FacilityDetails()

    if not isinstance(payload, list) or not payload:
        logger.warning("No facility records for PWSID %s", system_id)
        return FacilityDetails()

    record = payload[0]
    if not isinstance(record, Mapping):
        logger.warning("Unexpected facility record shape for PWSID %s", system_id)
        return FacilityDetails()

    return FacilityDetails(
        population_served=format_population(_field(record, FACILITY_FIELDS["population"])),
        source_water_type=decode_source_type(_field(record, FACILITY_FIELDS["source"])),
    )


def format_population(value: Any) -> str:
    """34109 -> "34,109"; absent or non-numeric -> "N/A"."""
    number = parse_number(value)
    if number is None:
        return NOT_AVAILABLE
    return f"{int(number):,}"


def decode_source_type(code: Any) -> str:
    if code is None or code == "":
        return NOT_AVAILABLE
    code = str(code)
    return SOURCE_WATER_TYPES.get(code, code)


def _field(record: Mapping, name: str) -> Optional[Any]:
    # Envirofacts returns lower-case keys; older SDWIS pulls use upper-case.
    if name in record:
        return record[name]
    return record.get(name.upper())
