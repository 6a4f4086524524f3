"""
Capacity Projection (core)

Purpose:
- Take the latest capacity row of every employee in a roster
- Copy it onto ONE target month
- Return the combined roster sorted by name, then month

Rules:
- Pure functions only
- No file access
- No printing
"""

from __future__ import annotations

import unicodedata
from datetime import date
from typing import Dict, Iterable, List, Tuple

from capacity_extender.projection.dates import format_date_string, parse_date_string
from capacity_extender.projection.roster_models import (
    DELIMITER,
    CapacityEntry,
    ProjectionResult,
)
from capacity_extender.projection.roster_parser import parse_roster
from capacity_extender.utils.logger import get_logger

logger = get_logger(__name__)


# ----------------------------
# Ordering
# ----------------------------

# Letters with no NFKD decomposition, spelled out as in collation tables
_LIGATURES = str.maketrans({
    "Œ": "OE", "œ": "oe",
    "Æ": "AE", "æ": "ae",
    "Ø": "O", "ø": "o",
    "Đ": "D", "đ": "d",
    "Ł": "L", "ł": "l",
})


def name_sort_key(name: str) -> Tuple[str, str]:
    """
    Locale-style name ordering: accents and case are ignored first
    ("Élodie" sorts with "Elodie", before "Fabrice"). Names equal on that
    key put lowercase first ("alice" before "Alice").
    """
    decomposed = unicodedata.normalize("NFKD", name.translate(_LIGATURES))
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return folded, name.swapcase()


def sort_entries(entries: Iterable[CapacityEntry], strict_dates: bool = True) -> List[CapacityEntry]:
    """Stable sort by name, then by parsed month ascending."""
    return sorted(
        entries,
        key=lambda e: (name_sort_key(e.name), parse_date_string(e.month_date, strict=strict_dates)),
    )


# ----------------------------
# Latest entry per employee
# ----------------------------

def select_latest_entries(
    entries: Iterable[CapacityEntry],
    strict_dates: bool = True,
) -> Dict[str, CapacityEntry]:
    """
    Latest entry per name, in first-seen name order.

    A later row replaces the held one only when its month is strictly
    greater, so on equal months the first row read is kept.
    """
    latest: Dict[str, CapacityEntry] = {}
    latest_dates: Dict[str, date] = {}

    for entry in entries:
        current = parse_date_string(entry.month_date, strict=strict_dates)
        held = latest_dates.get(entry.name)

        if held is None or current > held:
            latest[entry.name] = entry
            latest_dates[entry.name] = current

    return latest


def synthesize_entries(latest: Iterable[CapacityEntry], target_date: date) -> List[CapacityEntry]:
    """One new row per employee, dated on the target month."""
    target_str = format_date_string(target_date)
    target_year = f"{target_date.year:04d}"

    return [
        CapacityEntry(
            name=e.name,
            capacity=e.capacity,
            month_date=target_str,
            year=target_year,
            business_unit=e.business_unit,
        )
        for e in latest
    ]


def serialize_roster(header: str, entries: Iterable[CapacityEntry], delimiter: str = DELIMITER) -> str:
    lines = [header]
    lines.extend(e.to_row(delimiter) for e in entries)
    return "\n".join(lines)


# ----------------------------
# Use case
# ----------------------------

def project_capacity(
    raw_content: str,
    target_date: date,
    *,
    strict_dates: bool = True,
    skip_existing: bool = False,
) -> ProjectionResult:
    """
    Project every employee's latest capacity onto target_date.

    :param raw_content: Full roster text, header line first.
    :param target_date: Month the new rows are dated on.
    :param strict_dates: Reject out-of-range months instead of rolling them over.
    :param skip_existing: Add no row for an employee whose latest entry is
        already on target_date. Off by default, so re-running appends again.
    :raises EmptyInputError: If the roster has no header or no data lines.
    """
    logger.info("Projecting roster capacity | target=%s", target_date)

    roster = parse_roster(raw_content, strict_dates=strict_dates)
    latest = select_latest_entries(roster.entries, strict_dates=strict_dates)

    basis = list(latest.values())
    if skip_existing:
        basis = [
            e for e in basis
            if parse_date_string(e.month_date, strict=strict_dates) != target_date
        ]
        if len(basis) < len(latest):
            logger.info(
                "Skipping %d employee(s) already projected to %s",
                len(latest) - len(basis),
                target_date,
            )

    new_entries = synthesize_entries(basis, target_date)
    combined = sort_entries(roster.entries + new_entries, strict_dates=strict_dates)

    logger.info(
        "Projection complete | original=%d added=%d skipped=%d",
        len(roster.entries),
        len(new_entries),
        len(roster.skipped),
    )

    return ProjectionResult(
        processed_content=serialize_roster(roster.header, combined),
        original_count=len(roster.entries),
        added_count=len(new_entries),
        entries=combined,
        skipped=roster.skipped,
    )
