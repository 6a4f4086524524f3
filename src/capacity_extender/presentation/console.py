from __future__ import annotations

import io
from datetime import date
from typing import List, Sequence

import pandas as pd

from capacity_extender.projection.roster_models import ProcessingResult, SkippedRow


def _format_table(rows: Sequence[Sequence[object]], headers: List[str], max_rows: int | None = None) -> str:
    output = io.StringIO()
    rows = list(rows)

    if max_rows is not None and len(rows) > max_rows:
        shown = rows[:max_rows]
        omitted = len(rows) - max_rows
    else:
        shown = rows
        omitted = 0

    widths = [len(h) for h in headers]
    for row in shown:
        for i, v in enumerate(row):
            widths[i] = max(widths[i], len(str(v)))

    def fmt(r):
        return " ".join(str(r[i]).ljust(widths[i]) for i in range(len(headers))).rstrip()

    print(fmt(headers), file=output)
    print(" ".join("-" * w for w in widths), file=output)
    for row in shown:
        print(fmt(row), file=output)

    if omitted:
        print(f"... ({omitted} more rows omitted) ...", file=output)

    return output.getvalue()


def render_projection_summary(
    result: ProcessingResult,
    target_date: date,
    by_business_unit: pd.DataFrame,
    skipped: Sequence[SkippedRow] = (),
) -> str:
    """
    Plain-text run summary.

    Presentation-layer only:
    - No file access
    - No business logic
    """
    out = io.StringIO()

    print("=" * 70, file=out)
    print("CAPACITY EXTENDER - PROJECTION SUMMARY", file=out)
    print("=" * 70, file=out)
    print(f"Target Month:     {target_date.strftime('%d/%m/%Y')}", file=out)
    print(f"Output File:      {result.file_name}", file=out)
    if result.output_path is not None:
        print(f"Saved To:         {result.output_path}", file=out)
    else:
        print("Saved To:         (dry run, nothing written)", file=out)
    print(file=out)

    print(f"Original Rows:    {result.original_count}", file=out)
    print(f"New Entries:      {result.new_entries_count}", file=out)
    print(f"Total Rows:       {result.row_count}", file=out)
    print(f"Skipped Rows:     {result.skipped_count}", file=out)
    print(file=out)

    if not by_business_unit.empty:
        print("== Target Month by Business Unit ==\n", file=out)
        rows = [
            (
                r.business_unit,
                int(r.headcount),
                f"{r.total_capacity:.2f}",
                int(r.missing_capacity),
            )
            for r in by_business_unit.itertuples(index=False)
        ]
        print(
            _format_table(rows, ["business_unit", "headcount", "total_capacity", "missing_capacity"]),
            file=out,
        )

    if skipped:
        print("WARNING: Rows skipped during validation:", file=out)
        for row in skipped[:20]:
            print(f" - line {row.line_number}: {row.reason}", file=out)
        if len(skipped) > 20:
            print(f" ... ({len(skipped) - 20} more)", file=out)
        print(file=out)

    print("=" * 70, file=out)

    return out.getvalue()
