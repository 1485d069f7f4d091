from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum
from pathlib import Path

from .member import Member

"""Import result models.

LineDiagnostic is the per-line rejection record; ImportOutcome bundles the
accepted members of one run with every diagnostic produced along the way.
"""

__all__ = [
    "DiagnosticKind",
    "LineDiagnostic",
    "ImportOutcome",
    "render_report",
]


class DiagnosticKind(Enum):
    """Why a line was rejected."""
    MISSING_COLUMNS = "MISSING_COLUMNS"
    MALFORMED_LINE = "MALFORMED_LINE"
    INVALID_FIELD = "INVALID_FIELD"
    DUPLICATE = "DUPLICATE"
    CONSTRUCTION_FAILED = "CONSTRUCTION_FAILED"


@dataclass(frozen=True)
class LineDiagnostic:
    """One human-readable rejection reason for one roster line.

    Attributes:
        line_number: 1-based physical line number (header = 1)
        kind: rejection classification
        message: reason without the line prefix, e.g. ``Invalid phone number (123)``
    """
    line_number: int
    kind: DiagnosticKind
    message: str

    def __str__(self) -> str:
        return f"Line {self.line_number}: {self.message}"

    def to_json_line(self, file: str) -> str:
        """Serialize to one JSON Lines entry (fixed key set)."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return json.dumps(
            {
                "timestamp": ts,
                "file": file,
                "line": self.line_number,
                "error_type": self.kind.value,
                "message": self.message,
            },
            ensure_ascii=False,
        )


def render_report(diagnostics: tuple[LineDiagnostic, ...] | list[LineDiagnostic]) -> str:
    """Aggregate diagnostics into the report text (empty when there are none)."""
    if not diagnostics:
        return ""
    body = "\n".join(str(d) for d in diagnostics)
    return f"Skipped {len(diagnostics)} invalid line(s):\n{body}"


@dataclass(frozen=True)
class ImportOutcome:
    """Result of one import run."""
    source: Path
    members: tuple[Member, ...] = ()  # file order, in-file duplicates excluded
    diagnostics: tuple[LineDiagnostic, ...] = ()

    @property
    def report(self) -> str:
        return render_report(self.diagnostics)

    @property
    def rejected_lines(self) -> int:
        """Number of distinct lines that produced at least one diagnostic."""
        return len({d.line_number for d in self.diagnostics})

    @property
    def ok(self) -> bool:
        return not self.diagnostics
