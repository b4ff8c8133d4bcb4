"""
TapWatch · Exceedance Model

Reclassifies contaminants against the EWG health guideline.

The provider ships its own "exceeds" / "others" split, but that split does not
always agree with its own numeric fields. The lists are merged and every
contaminant is placed again from its system average and guideline value, so an
"exceeds" badge is always backed by the numbers shown next to it.
"""

from typing import Any, Iterable, List, Optional

from models.records import ClassifiedReport, Contaminant


def exceeds_guideline(contaminant: Contaminant) -> bool:
    """
    True when the system average is above a defined, positive guideline.

    A guideline of zero or below means no guideline is defined, so nothing
    can exceed it.
    """
    average = contaminant.system_average
    guideline = contaminant.health_guideline_value
    if average is None or guideline is None:
        return False
    return guideline > 0 and average > guideline


def classify(
    raw_exceeds: Optional[Iterable],
    raw_others: Optional[Iterable],
) -> ClassifiedReport:
    """
    Partition provider contaminant records into exceeding / others.

    Parameters
    ----------
    raw_exceeds, raw_others : list of dict, or None
        The provider's ``exceedsList`` and ``othersList``. Their placement is
        ignored; only the numeric fields decide. Anything other than a list
        or tuple is malformed and contributes no records.

    Returns
    -------
    ClassifiedReport
        Stable partition of ``raw_exceeds + raw_others``. No record is dropped.
    """
    exceeding: List[Contaminant] = []
    others: List[Contaminant] = []

    working_set = _records(raw_exceeds) + _records(raw_others)
    for record in working_set:
        contaminant = Contaminant.from_record(record)
        if exceeds_guideline(contaminant):
            exceeding.append(contaminant)
        else:
            others.append(contaminant)

    return ClassifiedReport(exceeding=tuple(exceeding), others=tuple(others))


def _records(raw: Any) -> List:
    if not isinstance(raw, (list, tuple)):
        return []
    return list(raw)
