from __future__ import annotations

import json
from pathlib import Path

from roster_csv.logging.error_log import DiagnosticLogBuffer
from roster_csv.models.import_outcome import DiagnosticKind, LineDiagnostic

"""Unit tests for the JSON Lines diagnostic log buffer."""


def test_flush_writes_one_json_line_per_diagnostic(tmp_path: Path):
    buffer = DiagnosticLogBuffer(tmp_path / "logs")
    buffer.extend(
        "members.csv",
        [
            LineDiagnostic(2, DiagnosticKind.INVALID_FIELD, "Invalid year (9)"),
            LineDiagnostic(3, DiagnosticKind.DUPLICATE, "Duplicate phone number (81234567)"),
        ],
    )
    fp = buffer.flush()
    assert fp is not None and fp.parent == tmp_path / "logs"
    assert fp.name.startswith("diagnostics-") and fp.suffix == ".log"
    rows = [json.loads(line) for line in fp.read_text(encoding="utf-8").splitlines()]
    assert [r["line"] for r in rows] == [2, 3]
    assert rows[1]["error_type"] == "DUPLICATE"
    assert rows[0]["file"] == "members.csv"
    assert len(buffer) == 0


def test_flush_empty_buffer_writes_nothing(tmp_path: Path):
    buffer = DiagnosticLogBuffer(tmp_path / "logs")
    assert buffer.flush() is None
    assert not (tmp_path / "logs").exists()


def test_flush_appends_to_same_file(tmp_path: Path):
    buffer = DiagnosticLogBuffer(tmp_path)
    buffer.append("a.csv", LineDiagnostic(2, DiagnosticKind.MISSING_COLUMNS, "Missing required columns."))
    first = buffer.flush()
    buffer.append("a.csv", LineDiagnostic(4, DiagnosticKind.MISSING_COLUMNS, "Missing required columns."))
    second = buffer.flush()
    assert first == second
    assert len(second.read_text(encoding="utf-8").splitlines()) == 2
