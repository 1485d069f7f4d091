from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..csvfile.format import DEFAULT_FILENAME
from ..models.import_outcome import ImportOutcome
from ..models.member import Member

"""In-memory member roster and import reconciliation.

The importer only deduplicates within one file. Reconciliation here is the
second tier: accepted members already present in the roster (same student
number) are counted as duplicates and not added.
"""

__all__ = [
    "MESSAGE_INVALID_FILETYPE",
    "DuplicateMemberError",
    "InvalidFileTypeError",
    "ImportSummary",
    "MemberRoster",
    "ensure_csv_path",
    "import_into_roster",
    "render_import_message",
    "resolve_roster_path",
]

MESSAGE_SUCCESS = "Import complete: {added} member(s) added."
MESSAGE_DUPLICATES = "\n\nNote: {duplicates} existing member(s) were skipped as duplicates."
MESSAGE_INVALID_DATA = "\n\nSome entries were skipped due to invalid data.\n"
MESSAGE_INVALID_FILETYPE = (
    "Invalid file format. Only .csv files are supported. Example: import /from members.csv"
)


class InvalidFileTypeError(ValueError):
    """Raised when an explicitly supplied import path is not a .csv file."""


class DuplicateMemberError(ValueError):
    """Raised when adding a member whose student number is already in the roster."""


class MemberRoster:
    """Ordered in-memory store of members keyed by student number."""

    def __init__(self, members: Iterable[Member] = ()) -> None:
        self._members: dict[str, Member] = {}
        for m in members:
            self.add_member(m)

    def has_member(self, member: Member) -> bool:
        return member.student_number.value in self._members

    def add_member(self, member: Member) -> None:
        key = member.student_number.value
        if key in self._members:
            raise DuplicateMemberError(f"member already exists: {key}")
        self._members[key] = member

    @property
    def members(self) -> list[Member]:
        return list(self._members.values())

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self):
        return iter(self._members.values())


@dataclass(frozen=True)
class ImportSummary:
    """Caller-facing result of importing a file into a roster."""
    accepted: int  # members accepted by the importer
    added: int  # members actually added to the roster
    duplicates: int  # accepted members already present in the roster
    report: str  # importer diagnostic report ("" when clean)
    diagnostics: int = 0


def ensure_csv_path(raw: str | None) -> None:
    """Reject an explicitly supplied path that does not end in ``.csv``.

    Raises:
        InvalidFileTypeError: ``raw`` is non-blank and not a .csv path
    """
    if raw is not None and raw.strip() and not raw.strip().lower().endswith(".csv"):
        raise InvalidFileTypeError(MESSAGE_INVALID_FILETYPE)


def resolve_roster_path(raw: str | None, default_path: str = DEFAULT_FILENAME) -> Path:
    """Return ``raw`` as a Path, or ``default_path`` when ``raw`` is blank."""
    if raw is None or not raw.strip():
        return Path(default_path)
    return Path(raw.strip())


def import_into_roster(outcome: ImportOutcome, roster: MemberRoster) -> ImportSummary:
    """Add accepted members to ``roster``, counting those already present."""
    added = 0
    duplicates = 0
    for member in outcome.members:
        if roster.has_member(member):
            duplicates += 1
        else:
            roster.add_member(member)
            added += 1
    return ImportSummary(
        accepted=len(outcome.members),
        added=added,
        duplicates=duplicates,
        report=outcome.report,
        diagnostics=len(outcome.diagnostics),
    )


def render_import_message(summary: ImportSummary) -> str:
    """Compose the user-facing import message."""
    message = MESSAGE_SUCCESS.format(added=summary.added)
    if summary.duplicates > 0:
        message += MESSAGE_DUPLICATES.format(duplicates=summary.duplicates)
    if summary.report:
        message += MESSAGE_INVALID_DATA + summary.report
    return message
