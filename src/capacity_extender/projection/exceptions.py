from __future__ import annotations


class CapacityExtenderError(Exception):
    """Base class for every error surfaced to the user by a projection run."""


class EmptyInputError(CapacityExtenderError):
    """Raised when the roster has no header or no data lines."""

    def __init__(self, message: str = "CSV file is empty or missing headers") -> None:
        super().__init__(message)


class InvalidDateError(CapacityExtenderError, ValueError):
    """Raised when date text cannot be turned into a calendar date."""


class UnsupportedFileError(CapacityExtenderError):
    """Raised when the selected input is not a CSV file."""


class RosterReadError(CapacityExtenderError):
    """Raised when the roster file cannot be read from disk."""
