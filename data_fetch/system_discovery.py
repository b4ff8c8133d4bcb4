"""
TapWatch · System Discovery

Finds the public water systems serving a zip code.
"""

import logging
from typing import List, Sequence, Tuple

from config.constants import SYSTEM_FIELDS
from data_fetch.errors import MissingInputError, NoSystemsFoundError
from models.records import WaterSystem

logger = logging.getLogger(__name__)


def discover_systems(client, zip_code: str) -> List[WaterSystem]:
    """
    Return the water systems for a zip code, in provider order.

    Raises ``MissingInputError`` for a blank zip (no request is made) and
    ``NoSystemsFoundError`` when the provider answers with no systems.
    Transport and status failures propagate from the client.
    """
    zip_code = (zip_code or "").strip()
    if not zip_code:
        raise MissingInputError("Zip code is required")

    payload = client.get_systems(zip_code)
    records = payload.get(SYSTEM_FIELDS["list"]) if isinstance(payload, dict) else None

    systems = []
    for record in records or []:
        if not isinstance(record, dict):
            continue
        system = WaterSystem.from_record(record)
        if not system.identifier:
            logger.warning("Skipping system without PWSID for zip %s: %s", zip_code, record)
            continue
        systems.append(system)

    if not systems:
        raise NoSystemsFoundError(zip_code)

    logger.info("Found %d water system(s) for zip %s", len(systems), zip_code)
    return systems


def split_primary(systems: Sequence[WaterSystem]) -> Tuple[WaterSystem, List[WaterSystem]]:
    """First system is the primary report; the rest are offered as alternates."""
    if not systems:
        raise ValueError("split_primary needs at least one system")
    return systems[0], list(systems[1:])
