from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from ..models.import_outcome import LineDiagnostic

"""Diagnostic log buffering.

Line diagnostics of an import run are buffered and flushed as JSON Lines to
``<log_dir>/diagnostics-YYYYMMDD-HHMMSS.log`` (UTC). The key set is fixed:
timestamp, file, line, error_type, message.
"""

__all__ = [
    "DiagnosticLogBuffer",
]

TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class DiagnosticLogBuffer:
    """In-memory buffer of (file, diagnostic) pairs. ``flush`` appends JSON Lines.

    The log file path is fixed on first access; serial use only.
    """

    def __init__(self, log_dir: Path) -> None:
        self.log_dir = log_dir
        self._entries: list[tuple[str, LineDiagnostic]] = []
        self._file_path: Path | None = None

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self.log_dir / f"diagnostics-{stamp}.log"
        return self._file_path

    def append(self, file: str, diagnostic: LineDiagnostic) -> None:
        self._entries.append((file, diagnostic))

    def extend(self, file: str, diagnostics: tuple[LineDiagnostic, ...] | list[LineDiagnostic]) -> None:
        for d in diagnostics:
            self.append(file, d)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._entries)

    def flush(self) -> Path | None:
        """Write buffered entries; returns the log path, or None when nothing was written."""
        if not self._entries:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for file, d in self._entries:
                f.write(d.to_json_line(file) + "\n")
        self._entries.clear()
        return fp
