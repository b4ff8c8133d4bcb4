"""
TapWatch · Report Records

Immutable values passed between discovery, enrichment, classification and
rendering. Upstream payloads are plain dicts; these records are the only
shapes the rest of the code relies on.
"""

import math
import re
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional, Tuple

from config.constants import CONTAMINANT_FIELDS, NOT_AVAILABLE, SYSTEM_FIELDS

_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_number(value: Any) -> Optional[float]:
    """
    Parse a provider value as a float, or return None when it is not a number.

    Strings are read from their leading numeric prefix ("12 ppb" -> 12.0).
    Booleans and non-finite values count as unparseable: NaN, infinities,
    and anything too large for a float ("1e400", 10 ** 400). The string
    "Infinity" has no numeric prefix and is unparseable too.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if not match:
            return None
        number = float(match.group(0))
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


@dataclass(frozen=True)
class FacilityDetails:
    population_served: str = NOT_AVAILABLE
    source_water_type: str = NOT_AVAILABLE


@dataclass(frozen=True)
class WaterSystem:
    identifier: str
    display_name: str
    population_served: str = NOT_AVAILABLE
    source_water_type: str = NOT_AVAILABLE

    @classmethod
    def from_record(cls, record: Mapping) -> "WaterSystem":
        identifier = str(record.get(SYSTEM_FIELDS["id"]) or "").strip()
        name = record.get(SYSTEM_FIELDS["name"]) or identifier
        return cls(identifier=identifier, display_name=str(name))

    def with_facility(self, details: FacilityDetails) -> "WaterSystem":
        return replace(
            self,
            population_served=details.population_served,
            source_water_type=details.source_water_type,
        )


@dataclass(frozen=True)
class Contaminant:
    name: str
    effect_description: str = ""
    display_units: str = ""
    system_average: Optional[float] = None
    health_guideline_value: Optional[float] = None
    legal_limit_value: Optional[float] = None

    @classmethod
    def from_record(cls, record: Any) -> "Contaminant":
        if not isinstance(record, Mapping):
            record = {}
        return cls(
            name=str(record.get(CONTAMINANT_FIELDS["name"]) or "Unknown contaminant"),
            effect_description=str(record.get(CONTAMINANT_FIELDS["effect"]) or ""),
            display_units=str(record.get(CONTAMINANT_FIELDS["units"]) or ""),
            system_average=parse_number(record.get(CONTAMINANT_FIELDS["average"])),
            health_guideline_value=parse_number(record.get(CONTAMINANT_FIELDS["guideline"])),
            legal_limit_value=parse_number(record.get(CONTAMINANT_FIELDS["legal_limit"])),
        )


@dataclass(frozen=True)
class ClassifiedReport:
    exceeding: Tuple[Contaminant, ...] = field(default_factory=tuple)
    others: Tuple[Contaminant, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.exceeding) + len(self.others)

    @property
    def is_empty(self) -> bool:
        return self.total == 0
