from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

ROSTER_FIELD_COUNT = 5
DELIMITER = ";"


# ------------------------------------------------------------
# One roster row (Name;Capacity;Month;Year;BusinessUnit)
# ------------------------------------------------------------
@dataclass(frozen=True)
class CapacityEntry:
    name: str
    capacity: str
    month_date: str  # DD/MM/YYYY
    year: str
    business_unit: str

    def to_row(self, delimiter: str = DELIMITER) -> str:
        return delimiter.join(
            [self.name, self.capacity, self.month_date, self.year, self.business_unit]
        )


# ------------------------------------------------------------
# A data line rejected by row validation
# ------------------------------------------------------------
@dataclass(frozen=True)
class SkippedRow:
    line_number: int  # 1-based line in the source text
    raw: str
    reason: str


# ------------------------------------------------------------
# Parsed roster (header kept verbatim)
# ------------------------------------------------------------
@dataclass
class ParsedRoster:
    header: str
    entries: List[CapacityEntry]
    skipped: List[SkippedRow] = field(default_factory=list)


# ------------------------------------------------------------
# Core transformation output
# ------------------------------------------------------------
@dataclass
class ProjectionResult:
    processed_content: str
    original_count: int
    added_count: int
    entries: List[CapacityEntry] = field(default_factory=list)
    skipped: List[SkippedRow] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)


# ------------------------------------------------------------
# What the result surface shows / saves
# ------------------------------------------------------------
@dataclass
class ProcessingResult:
    content: str
    row_count: int
    new_entries_count: int
    file_name: str
    original_count: int = 0
    entries: List[CapacityEntry] = field(default_factory=list)
    skipped: List[SkippedRow] = field(default_factory=list)
    output_path: Optional[Path] = None

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)
