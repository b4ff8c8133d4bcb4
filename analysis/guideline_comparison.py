"""
TapWatch · Health Guideline Comparison

Turns a classified report into display-ready counts and rows. Pure: no I/O,
no Streamlit. The dashboard renders whatever ``assemble_report`` returns.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from config.constants import NOT_AVAILABLE
from models.records import ClassifiedReport, Contaminant, WaterSystem


@dataclass(frozen=True)
class ContaminantRow:
    name: str
    effect: str
    your_water: str
    guideline: str
    legal_limit: str
    exceeds: bool
    multiplier: Optional[float] = None

    @property
    def multiplier_label(self) -> Optional[str]:
        if self.multiplier is None:
            return None
        return f"{self.multiplier:.2f}X"


@dataclass(frozen=True)
class ReportView:
    system: WaterSystem
    exceeding_count: int
    total_count: int
    exceeding_rows: Tuple[ContaminantRow, ...]
    other_rows: Tuple[ContaminantRow, ...]
    note: Optional[str] = None


def guideline_multiplier(contaminant: Contaminant) -> Optional[float]:
    """
    How many times the system average exceeds the guideline, to 2 dp.

    None when the guideline is absent or not positive, or the average is absent.
    """
    average = contaminant.system_average
    guideline = contaminant.health_guideline_value
    if average is None or guideline is None or guideline <= 0:
        return None
    return round(average / guideline, 2)


def assemble_report(
    system: WaterSystem,
    classified: ClassifiedReport,
    note: Optional[str] = None,
) -> ReportView:
    """
    Combine an enriched system and its classified contaminants.

    Returns
    -------
    ReportView with exceedance count, total count, and one row per
    contaminant. Only exceeding rows carry a multiplier.
    """
    return ReportView(
        system=system,
        exceeding_count=len(classified.exceeding),
        total_count=classified.total,
        exceeding_rows=_rows(classified.exceeding, exceeds=True),
        other_rows=_rows(classified.others, exceeds=False),
        note=note,
    )


def _rows(contaminants: Sequence[Contaminant], exceeds: bool) -> Tuple[ContaminantRow, ...]:
    return tuple(
        ContaminantRow(
            name=c.name,
            effect=c.effect_description or NOT_AVAILABLE,
            your_water=_with_units(c.system_average, c.display_units),
            guideline=_with_units(c.health_guideline_value, c.display_units),
            legal_limit=_with_units(c.legal_limit_value, c.display_units),
            exceeds=exceeds,
            multiplier=guideline_multiplier(c) if exceeds else None,
        )
        for c in contaminants
    )


def _with_units(value: Optional[float], units: str) -> str:
    if value is None:
        return NOT_AVAILABLE
    text = f"{value:g}"
    return f"{text} {units}".strip()
