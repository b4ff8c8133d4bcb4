"""
TapWatch · Contaminant Table

Flat pandas table of every contaminant in a report, for the detail view
and the CSV download.
"""

import pandas as pd

from analysis.guideline_comparison import ReportView

TABLE_COLUMNS = [
    "Contaminant",
    "Status",
    "Your Water",
    "EWG Health Guideline",
    "Legal Limit",
    "Times Guideline",
    "Health Risk",
]


def build_contaminant_table(view: ReportView) -> pd.DataFrame:
    records = []
    for row in view.exceeding_rows + view.other_rows:
        records.append({
            "Contaminant": row.name,
            "Status": "Exceeds guideline" if row.exceeds else "Detected",
            "Your Water": row.your_water,
            "EWG Health Guideline": row.guideline,
            "Legal Limit": row.legal_limit,
            "Times Guideline": row.multiplier,
            "Health Risk": row.effect,
        })
    return pd.DataFrame(records, columns=TABLE_COLUMNS)


def table_to_csv(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")
