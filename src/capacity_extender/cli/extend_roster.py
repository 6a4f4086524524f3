# src/capacity_extender/cli/extend_roster.py

from pathlib import Path
from typing import List, Optional
import argparse
import sys

from capacity_extender.application.extend_roster_app import (
    CapacityExtenderApplication,
)
from capacity_extender.presentation.console import render_projection_summary
from capacity_extender.projection.dates import parse_target_date
from capacity_extender.projection.exceptions import CapacityExtenderError
from capacity_extender.projection.summary import (
    build_roster_frame,
    summarize_by_business_unit,
)
from capacity_extender.utils.config import settings


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Copy each employee's latest capacity onto a new target month."
    )

    parser.add_argument("roster", type=str, help="Semicolon-delimited roster CSV.")
    parser.add_argument(
        "--target-date",
        type=str,
        required=True,
        help="Projection date (YYYY-MM-DD) or 'today'.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help=f"Output directory. Defaults to OUTPUT_DIR ({settings.output_dir}).",
    )
    parser.add_argument(
        "--skip-existing",
        action="store_true",
        default=None,
        help="Do not add a row for employees whose latest entry is already on the target date.",
    )
    parser.add_argument(
        "--lenient-dates",
        action="store_true",
        help="Roll out-of-range months over (32/01 -> 01/02) instead of skipping the row.",
    )
    parser.add_argument("--dry-run", action="store_true", help="Project without writing the file.")
    parser.add_argument("--print", dest="print_csv", action="store_true", help="Echo the projected CSV.")

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        target_date = parse_target_date(args.target_date)

        app = CapacityExtenderApplication()
        result = app.run(
            input_path=Path(args.roster),
            target_date=target_date,
            output_root=Path(args.output) if args.output else None,
            skip_existing=args.skip_existing,
            strict_dates=False if args.lenient_dates else None,
            dry_run=args.dry_run,
        )

        by_bu = summarize_by_business_unit(build_roster_frame(result.entries), target_date)
        print(render_projection_summary(result, target_date, by_bu, result.skipped), end="")

        if args.print_csv:
            print(result.content)

        return 0

    except CapacityExtenderError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
