import pytest

from capacity_extender.projection.exceptions import EmptyInputError
from capacity_extender.projection.roster_models import CapacityEntry, SkippedRow
from capacity_extender.projection.roster_parser import (
    parse_roster,
    parse_roster_line,
    split_roster_lines,
)


# ─────────────────────────────────────────────────────────────
# Line splitting
# ─────────────────────────────────────────────────────────────

class TestSplitRosterLines:
    def test_header_and_numbered_data_lines(self, sample_roster):
        header, lines = split_roster_lines(sample_roster)
        assert header == "Nom;Capacité;Mois;Année;BU"
        assert [n for n, _ in lines] == [2, 3]

    def test_crlf_and_blank_lines(self):
        header, lines = split_roster_lines("H\r\n\r\nA;1;01/01/2024;2024;X\r\n   \r\n")
        assert header == "H"
        assert lines == [(3, "A;1;01/01/2024;2024;X")]

    @pytest.mark.parametrize("raw", ["", "\n\n", "Nom;Capacité;Mois;Année;BU", "Nom;Capacité;Mois;Année;BU\n\n  \r\n"])
    def test_fewer_than_two_lines_raises(self, raw):
        with pytest.raises(EmptyInputError, match="empty or missing headers"):
            split_roster_lines(raw)


# ─────────────────────────────────────────────────────────────
# Row validation
# ─────────────────────────────────────────────────────────────

class TestParseRosterLine:
    def test_fields_are_trimmed(self):
        entry = parse_roster_line(" Alice ; 80 ;01/01/2024; 2024 ; Eng ", 2)
        assert entry == CapacityEntry("Alice", "80", "01/01/2024", "2024", "Eng")

    def test_empty_trailing_fields_allowed(self):
        entry = parse_roster_line("Charlie;;01/02/2024;2024;", 2)
        assert entry == CapacityEntry("Charlie", "", "01/02/2024", "2024", "")

    def test_extra_fields_ignored(self):
        entry = parse_roster_line("Alice;80;01/01/2024;2024;Eng;note", 2)
        assert entry.business_unit == "Eng"

    def test_empty_name_skipped(self):
        skipped = parse_roster_line("  ;60;01/01/2024;2024;Ops", 5)
        assert skipped == SkippedRow(5, "  ;60;01/01/2024;2024;Ops", "empty name")

    def test_missing_fields_skipped(self):
        skipped = parse_roster_line("Alice;80;01/01/2024", 4)
        assert isinstance(skipped, SkippedRow)
        assert skipped.reason == "expected 5 fields, found 3"

    def test_invalid_month_skipped(self):
        skipped = parse_roster_line("Dan;70;01/13/2024;2024;Ops", 9)
        assert isinstance(skipped, SkippedRow)
        assert "01/13/2024" in skipped.reason

    def test_oversized_date_digits_skipped(self):
        skipped = parse_roster_line("Bob;50;" + "1" * 5000 + "/01/2024;2024;X", 3)
        assert isinstance(skipped, SkippedRow)
        assert "out of range" in skipped.reason

    def test_invalid_month_kept_when_lenient(self):
        entry = parse_roster_line("Dan;70;01/13/2024;2024;Ops", 9, strict_dates=False)
        assert isinstance(entry, CapacityEntry)
        assert entry.month_date == "01/13/2024"


class TestParseRoster:
    def test_collects_entries_and_skips(self):
        raw = (
            "Nom;Capacité;Mois;Année;BU\n"
            "Alice;80;01/01/2024;2024;Eng\n"
            ";60;01/01/2024;2024;Ops\n"
            "Bob;50;bad;2024;Sales\n"
        )
        roster = parse_roster(raw)

        assert roster.header == "Nom;Capacité;Mois;Année;BU"
        assert [e.name for e in roster.entries] == ["Alice"]
        assert [s.line_number for s in roster.skipped] == [3, 4]

    def test_oversized_date_does_not_abort_roster(self):
        raw = "H\nAlice;80;01/01/2024;2024;Eng\nBob;50;" + "1" * 5000 + "/01/2024;2024;X"
        roster = parse_roster(raw)

        assert [e.name for e in roster.entries] == ["Alice"]
        assert [s.line_number for s in roster.skipped] == [3]

    def test_all_rows_skipped_is_not_an_error(self):
        roster = parse_roster("H\n;1;01/01/2024;2024;X")
        assert roster.entries == []
        assert len(roster.skipped) == 1

    def test_skipped_rows_are_logged(self, caplog):
        with caplog.at_level("WARNING"):
            parse_roster("H\n;1;01/01/2024;2024;X")
        assert "empty name" in caplog.text
