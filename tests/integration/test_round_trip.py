from __future__ import annotations

from pathlib import Path

import pytest

from roster_csv.models.member import Member
from roster_csv.services.exporter import export_members
from roster_csv.services.importer import import_members

"""Integration tests: export then re-import through the real file format."""


def _roster() -> list[Member]:
    return [
        Member.from_strings("Ann Lee", "Year 1", "A1234567B", "ann@x.com", "81234567", "Vegetarian", "Member", ["friends"]),
        Member.from_strings("Bob Tan", "2", "B7654321C", "bob.tan@mail.example.org", "91234567", "None", "Treasurer", []),
        Member.from_strings("Cat Lim", "Year 4", "C1111111D", "cat+club@x.io", "61234567", "No Beef", "Vice President", ["a", "b"]),
    ]


def test_export_then_import_returns_same_members(tmp_path: Path):
    members = _roster()
    path = export_members(members, tmp_path / "roster.csv")
    outcome = import_members(path)
    assert outcome.report == ""
    assert list(outcome.members) == members


@pytest.mark.parametrize(
    "tag",
    [
        "has,comma",
        'has "quotes"',
        '"',
        ",",
        'mix, of "both"',
    ],
)
def test_escaped_tag_survives_round_trip(tmp_path: Path, tag: str):
    member = Member.from_strings("Ann Lee", "1", "A1234567B", "ann@x.com", "81234567", "None", "Member", [tag])
    path = export_members([member], tmp_path / "roster.csv")
    outcome = import_members(path)
    assert outcome.report == ""
    assert outcome.members[0].tag_names == [tag]


def test_reexport_is_stable(tmp_path: Path):
    first = export_members(_roster(), tmp_path / "a.csv")
    second = export_members(import_members(first).members, tmp_path / "b.csv")
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_partial_file_imports_and_reexports_valid_lines(tmp_path: Path):
    src = tmp_path / "dirty.csv"
    src.write_text(
        "\n".join(
            [
                "Name,Year,StudentNumber,Email,Phone,DietaryRequirements,Role,Tags",
                "Ann Lee,Year 1,A1234567B,ann@x.com,81234567,Vegetarian,Member,[friends]",
                "Ann Dup,Year 2,A1234567B,dup@x.com,99999999,None,Member,",
                "",
                "Short,line",
                "Bob Tan,2,B7654321C,bob@x.com,91234567,None,Treasurer,",
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    outcome = import_members(src)
    assert [m.name.value for m in outcome.members] == ["Ann Lee", "Bob Tan"]
    assert outcome.report.splitlines() == [
        "Skipped 2 invalid line(s):",
        "Line 3: Duplicate student number (A1234567B)",
        "Line 5: Missing required columns.",
    ]
    out = export_members(outcome.members, tmp_path / "clean.csv")
    assert import_members(out).members == outcome.members
