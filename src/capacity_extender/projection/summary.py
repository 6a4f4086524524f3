"""
Projected roster roll-ups (pandas).

Read-only views over a projection result for the console summary.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Iterable

import pandas as pd

from capacity_extender.projection.dates import format_date_string
from capacity_extender.projection.roster_models import CapacityEntry

ROSTER_COLUMNS = ["name", "capacity", "month_date", "year", "business_unit"]


def build_roster_frame(entries: Iterable[CapacityEntry]) -> pd.DataFrame:
    """
    DataFrame of roster entries, text columns untouched, plus a numeric
    capacity_value column (non-numeric capacity -> NaN).
    """
    df = pd.DataFrame([asdict(e) for e in entries], columns=ROSTER_COLUMNS)

    # French rosters may use a decimal comma
    df["capacity_value"] = pd.to_numeric(
        df["capacity"].str.replace(",", ".", regex=False),
        errors="coerce",
    )
    return df


def summarize_by_business_unit(df: pd.DataFrame, target_date: date) -> pd.DataFrame:
    """
    Headcount and capacity for the target month, per business unit.

    Columns: business_unit, headcount, total_capacity, missing_capacity
    """
    month = df[df["month_date"] == format_date_string(target_date)].copy()

    # A re-run on projected output holds two target rows per name; count each name once
    month = month.drop_duplicates(subset="name", keep="last")
    month["business_unit"] = month["business_unit"].replace("", "(none)")

    if month.empty:
        return pd.DataFrame(
            columns=["business_unit", "headcount", "total_capacity", "missing_capacity"]
        )

    summary = (
        month.groupby("business_unit", sort=True)
        .agg(
            headcount=("name", "nunique"),
            total_capacity=("capacity_value", "sum"),
            missing_capacity=("capacity_value", lambda s: int(s.isna().sum())),
        )
        .reset_index()
    )
    summary["total_capacity"] = summary["total_capacity"].round(2)
    return summary
