from __future__ import annotations

import json
from pathlib import Path

from roster_csv.models.import_outcome import DiagnosticKind, LineDiagnostic

"""Contract: JSON Lines diagnostic entries carry exactly the documented keys."""

EXPECTED_KEYS = {"timestamp", "file", "line", "error_type", "message"}


def test_diagnostic_json_line_keys():
    d = LineDiagnostic(7, DiagnosticKind.CONSTRUCTION_FAILED, "Error creating person (x)")
    data = json.loads(d.to_json_line(str(Path("members.csv"))))
    assert set(data.keys()) == EXPECTED_KEYS
    assert data["timestamp"].endswith("Z")
    assert data["line"] == 7
    assert data["error_type"] == "CONSTRUCTION_FAILED"


def test_diagnostic_text_form():
    d = LineDiagnostic(2, DiagnosticKind.INVALID_FIELD, "Invalid phone number (123)")
    assert str(d) == "Line 2: Invalid phone number (123)"


def test_error_types_are_upper_snake():
    for kind in DiagnosticKind:
        assert kind.value == kind.value.upper()
        assert " " not in kind.value
