from __future__ import annotations

from pathlib import Path

import pytest

from roster_csv.models.import_outcome import DiagnosticKind, ImportOutcome, LineDiagnostic
from roster_csv.models.member import Member
from roster_csv.services.roster import (
    MESSAGE_INVALID_FILETYPE,
    DuplicateMemberError,
    ImportSummary,
    InvalidFileTypeError,
    MemberRoster,
    ensure_csv_path,
    import_into_roster,
    render_import_message,
    resolve_roster_path,
)

"""Unit tests for roster reconciliation and the import message."""


def _member(sn: str, phone: str) -> Member:
    return Member.from_strings("Ann", "1", sn, "ann@x.com", phone, "None", "Member")


def test_roster_add_and_has():
    roster = MemberRoster()
    a = _member("A1234567B", "81234567")
    assert not roster.has_member(a)
    roster.add_member(a)
    assert roster.has_member(a)
    assert len(roster) == 1
    with pytest.raises(DuplicateMemberError):
        roster.add_member(_member("A1234567B", "91234567"))


def test_import_into_roster_counts_store_duplicates():
    existing = _member("A1234567B", "81234567")
    roster = MemberRoster([existing])
    outcome = ImportOutcome(
        source=Path("members.csv"),
        members=(_member("A1234567B", "81234567"), _member("B7654321C", "91234567")),
    )
    summary = import_into_roster(outcome, roster)
    assert summary.accepted == 2
    assert summary.added == 1
    assert summary.duplicates == 1
    assert len(roster) == 2


@pytest.mark.parametrize("raw", [None, "", "  ", "members.csv", "dir/MEMBERS.CSV"])
def test_ensure_csv_path_accepts(raw):
    ensure_csv_path(raw)


@pytest.mark.parametrize("raw", ["members.txt", "members", "a.csv.bak"])
def test_ensure_csv_path_rejects(raw):
    with pytest.raises(InvalidFileTypeError) as exc:
        ensure_csv_path(raw)
    assert str(exc.value) == MESSAGE_INVALID_FILETYPE


def test_resolve_roster_path_defaults():
    assert resolve_roster_path(None) == Path("members.csv")
    assert resolve_roster_path("  ", "data/x.csv") == Path("data/x.csv")
    assert resolve_roster_path(" in.csv ") == Path("in.csv")


def test_render_import_message_clean():
    s = ImportSummary(accepted=2, added=2, duplicates=0, report="")
    assert render_import_message(s) == "Import complete: 2 member(s) added."


def test_render_import_message_with_duplicates_and_report():
    report = ImportOutcome(
        source=Path("m.csv"),
        diagnostics=(LineDiagnostic(3, DiagnosticKind.INVALID_FIELD, "Invalid year (9)"),),
    ).report
    s = ImportSummary(accepted=1, added=0, duplicates=1, report=report, diagnostics=1)
    assert render_import_message(s) == (
        "Import complete: 0 member(s) added."
        "\n\nNote: 1 existing member(s) were skipped as duplicates."
        "\n\nSome entries were skipped due to invalid data.\n"
        "Skipped 1 invalid line(s):\nLine 3: Invalid year (9)"
    )
