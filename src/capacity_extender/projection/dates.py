"""
Roster date helpers.

Pure functions only:
- Roster months are DD/MM/YYYY text, naive calendar dates (no timezone)
- Target dates arrive as YYYY-MM-DD (or "today") from the CLI
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta

from capacity_extender.projection.exceptions import InvalidDateError

TARGET_DATE_FORMAT = "%Y-%m-%d"

_ROSTER_DATE = re.compile(r"^(\d+)/(\d+)/(\d+)$")


def _rolled_date(year: int, month: int, day: int) -> date:
    """
    Build a date, rolling surplus months and days into the following
    (or preceding) month/year: 31/02/2024 -> 02/03/2024, 01/13/2024 -> 01/01/2025.
    Years 0-99 are taken as 1900-1999: 01/01/24 -> 01/01/1924.
    """
    if 0 <= year <= 99:
        year += 1900  # two-digit years read as 19xx
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    return date(year, month, 1) + timedelta(days=day - 1)


def parse_date_string(date_str: str, strict: bool = True) -> date:
    """
    Parse a DD/MM/YYYY roster month into a date.

    strict=True rejects out-of-range day/month values.
    strict=False accepts them and applies calendar overflow instead.
    Non-numeric text is rejected in both modes.
    """
    match = _ROSTER_DATE.match(date_str.strip())
    if not match:
        raise InvalidDateError(f"Invalid date '{date_str}' (expected DD/MM/YYYY)")

    try:
        day, month, year = (int(part) for part in match.groups())
        if strict:
            return date(year, month, day)
        return _rolled_date(year, month, day)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(f"Invalid date '{date_str}' (day or month out of range)") from exc


def format_date_string(value: date) -> str:
    """Format a date as zero-padded DD/MM/YYYY."""
    return f"{value.day:02d}/{value.month:02d}/{value.year:04d}"


def parse_target_date(value: str) -> date:
    """
    Parse the projection target date (YYYY-MM-DD or "today").

    Malformed values are rejected here, before any roster is touched.
    """
    text = (value or "").strip()
    if text.lower() == "today":
        return date.today()

    try:
        return datetime.strptime(text, TARGET_DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidDateError(
            f"Invalid target date '{value}' (expected YYYY-MM-DD)"
        ) from exc
