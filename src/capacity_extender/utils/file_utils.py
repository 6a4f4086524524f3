# src/capacity_extender/utils/file_utils.py

from pathlib import Path

from capacity_extender.projection.exceptions import RosterReadError, UnsupportedFileError
from capacity_extender.utils.logger import get_logger

logger = get_logger(__name__)


def ensure_csv_file(path: Path) -> None:
    """
    Accept only .csv inputs (case-insensitive).

    :raises UnsupportedFileError: For any other extension.
    """
    if path.suffix.lower() != ".csv":
        raise UnsupportedFileError(f"Please upload a valid CSV file: {path.name}")


def read_roster_text(path: Path, encoding: str = "utf-8-sig") -> str:
    """
    Read the whole roster into memory.

    :raises RosterReadError: If the file is missing, unreadable or not decodable.
    """
    try:
        # newline="" keeps CRLF so the parser sees the original line endings
        with open(path, "r", encoding=encoding, newline="") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error(f"Error reading {path}: {exc}")
        raise RosterReadError("Failed to read the file.") from exc


def output_file_name(original_name: str, prefix: str = "modified_") -> str:
    return f"{prefix}{original_name}"


def write_text(content: str, output_path: Path, encoding: str = "utf-8") -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding=encoding, newline="") as handle:
        handle.write(content)
    logger.info(f"Wrote {output_path}")
    return output_path
