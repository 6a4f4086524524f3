import subprocess
import sys
from pathlib import Path
import difflib

ROOT = Path(__file__).resolve().parents[1]
GOLDEN = ROOT / "tests" / "golden"

TARGET_DATE = "2024-03-01"


def run_command(args: list) -> str:
    result = subprocess.run(
        [sys.executable, "-m", "capacity_extender.cli.extend_roster", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=ROOT,
    )
    if result.returncode != 0:
        print(result.stderr)
        sys.exit(result.returncode)
    return result.stdout


def diff(name: str, expected: str, actual: str) -> None:
    if expected == actual:
        print(f"✅ {name}: OK")
        return

    print(f"❌ {name}: CHANGED")
    for line in difflib.unified_diff(
        expected.splitlines(),
        actual.splitlines(),
        fromfile=f"golden/{name}",
        tofile="current",
        lineterm="",
    ):
        print(line)
    sys.exit(1)


def main():
    roster = str(GOLDEN / "roster.csv")

    # --- Console summary ---
    console_out = run_command([roster, "--target-date", TARGET_DATE, "--dry-run"])
    console_expected = (GOLDEN / "console_projection.txt").read_text(encoding="utf-8")

    diff("console_projection.txt", console_expected, console_out)

    # --- Projected CSV ---
    csv_out = run_command([roster, "--target-date", TARGET_DATE, "--dry-run", "--print"])
    csv_out = csv_out[len(console_out):]
    csv_expected = (GOLDEN / "modified_roster.csv").read_text(encoding="utf-8") + "\n"

    diff("modified_roster.csv", csv_expected, csv_out)


if __name__ == "__main__":
    main()
