from __future__ import annotations

from pathlib import Path

"""File-level error taxonomy for roster import/export.

Only these errors abort an import or export call. Line-level problems are
reported as diagnostics and never raised.
"""

__all__ = [
    "RosterFileError",
    "RosterNotFoundError",
    "EmptyRosterError",
    "RosterReadError",
    "ExportError",
]


class RosterFileError(Exception):
    """Base class for fatal roster file errors."""


class RosterNotFoundError(RosterFileError, FileNotFoundError):
    """Raised when the import path does not reference an existing file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"CSV file not found: {path}")


class EmptyRosterError(RosterFileError):
    """Raised when the roster file has no header line at all."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__("CSV file is empty.")


class RosterReadError(RosterFileError):
    """Raised when the roster file cannot be read or decoded."""


class ExportError(RosterFileError):
    """Raised when the export destination cannot be created or written."""
