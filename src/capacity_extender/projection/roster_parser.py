"""
Roster text parsing.

Rules:
- First non-blank line is the header, kept verbatim
- Blank lines are ignored (LF or CRLF endings)
- Every data line is validated on its own and either becomes a
  CapacityEntry or a SkippedRow carrying the reason
"""

from __future__ import annotations

import re
from typing import List, Tuple, Union

from capacity_extender.projection.dates import parse_date_string
from capacity_extender.projection.exceptions import EmptyInputError, InvalidDateError
from capacity_extender.projection.roster_models import (
    DELIMITER,
    ROSTER_FIELD_COUNT,
    CapacityEntry,
    ParsedRoster,
    SkippedRow,
)
from capacity_extender.utils.logger import get_logger

logger = get_logger(__name__)

_LINE_BREAK = re.compile(r"\r?\n")


def split_roster_lines(raw_content: str) -> Tuple[str, List[Tuple[int, str]]]:
    """
    Split raw roster text into (header, [(line_number, line), ...]).

    Raises EmptyInputError when fewer than two non-blank lines remain.
    """
    lines = [
        (number, line)
        for number, line in enumerate(_LINE_BREAK.split(raw_content), start=1)
        if line.strip() != ""
    ]

    if len(lines) < 2:
        raise EmptyInputError()

    return lines[0][1], lines[1:]


def parse_roster_line(
    line: str,
    line_number: int,
    *,
    strict_dates: bool = True,
) -> Union[CapacityEntry, SkippedRow]:
    """Parse one data line positionally; invalid rows come back as SkippedRow."""
    parts = [part.strip() for part in line.split(DELIMITER)]

    if parts[0] == "":
        return SkippedRow(line_number, line, "empty name")

    if len(parts) < ROSTER_FIELD_COUNT:
        return SkippedRow(
            line_number,
            line,
            f"expected {ROSTER_FIELD_COUNT} fields, found {len(parts)}",
        )

    name, capacity, month_date, year, business_unit = parts[:ROSTER_FIELD_COUNT]

    try:
        parse_date_string(month_date, strict=strict_dates)
    except InvalidDateError as exc:
        return SkippedRow(line_number, line, str(exc))

    return CapacityEntry(
        name=name,
        capacity=capacity,
        month_date=month_date,
        year=year,
        business_unit=business_unit,
    )


def parse_roster(raw_content: str, *, strict_dates: bool = True) -> ParsedRoster:
    """
    Parse the whole roster text.

    Skipped rows are logged and returned, never raised.
    """
    header, data_lines = split_roster_lines(raw_content)

    entries: List[CapacityEntry] = []
    skipped: List[SkippedRow] = []

    for line_number, line in data_lines:
        parsed = parse_roster_line(line, line_number, strict_dates=strict_dates)
        if isinstance(parsed, SkippedRow):
            logger.warning("Skipping line %d (%s): %r", line_number, parsed.reason, line)
            skipped.append(parsed)
        else:
            entries.append(parsed)

    logger.info(
        "Parsed roster | rows=%d valid=%d skipped=%d",
        len(data_lines),
        len(entries),
        len(skipped),
    )

    return ParsedRoster(header=header, entries=entries, skipped=skipped)
