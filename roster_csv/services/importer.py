from __future__ import annotations

import csv
import logging
from pathlib import Path

from ..csvfile.format import COLUMNS, cell_or_default, parse_tags, split_line
from ..csvfile.reader import read_data_lines
from ..models.import_outcome import DiagnosticKind, ImportOutcome, LineDiagnostic
from ..models.member import Member
from .progress import LineProgress
from .validation import validate_cells

"""Roster importer.

Reads a roster file, validates every data line and builds Members only for
lines where all checks pass. Line-level problems become diagnostics and never
abort the run; only file-level errors (missing file, empty file) are raised.

Student numbers and phones are deduplicated within one run: the first
accepted occurrence wins and later lines repeating the value are rejected.
Duplicates against an existing roster are the caller's concern.
"""

__all__ = [
    "import_members",
]

logger = logging.getLogger(__name__)

MISSING_COLUMNS_MESSAGE = "Missing required columns."


def import_members(
    path: Path,
    *,
    encoding: str = "utf-8",
    progress: LineProgress | None = None,
) -> ImportOutcome:
    """Import members from the roster file at ``path``.

    Args:
        path: roster file (the caller resolves any default)
        encoding: text encoding of the file
        progress: optional progress display advanced once per data line

    Returns:
        ImportOutcome with the accepted members (file order) and diagnostics

    Raises:
        RosterNotFoundError: ``path`` does not exist
        EmptyRosterError: the file has no header line
    """
    lines = read_data_lines(path, encoding=encoding)
    if progress is not None:
        progress.set_total(len(lines))

    members: list[Member] = []
    diagnostics: list[LineDiagnostic] = []
    seen_student_numbers: set[str] = set()
    seen_phones: set[str] = set()

    for line in lines:
        try:
            raw_cells = split_line(line.text)
        except csv.Error as e:
            diagnostics.append(
                LineDiagnostic(line.line_number, DiagnosticKind.MALFORMED_LINE, f"Unreadable line ({e})")
            )
            _advance(progress, accepted=False)
            continue
        if len(raw_cells) < len(COLUMNS):
            diagnostics.append(
                LineDiagnostic(line.line_number, DiagnosticKind.MISSING_COLUMNS, MISSING_COLUMNS_MESSAGE)
            )
            _advance(progress, accepted=False)
            continue

        cells = [cell_or_default(raw_cells, i) for i in range(len(COLUMNS))]
        validation = validate_cells(cells, seen_student_numbers, seen_phones)
        if not validation.ok:
            for v in validation.violations:
                diagnostics.append(LineDiagnostic(line.line_number, v.kind, v.message))
            _advance(progress, accepted=False)
            continue

        name, year, student_number, email, phone, diet, role, tags = cells
        try:
            member = Member.from_strings(
                name, year, student_number, email, phone, diet, role, parse_tags(tags)
            )
        except ValueError as e:
            logger.debug(f"line {line.line_number}: constructor rejected value: {e}")
            diagnostics.append(
                LineDiagnostic(
                    line.line_number,
                    DiagnosticKind.CONSTRUCTION_FAILED,
                    f"Error creating person ({e})",
                )
            )
            _advance(progress, accepted=False)
            continue

        members.append(member)
        seen_student_numbers.add(student_number)
        seen_phones.add(phone)
        _advance(progress, accepted=True)

    outcome = ImportOutcome(source=path, members=tuple(members), diagnostics=tuple(diagnostics))
    if diagnostics:
        logger.warning(
            f"{len(diagnostics)} diagnostic(s) on {outcome.rejected_lines} line(s) in {path}"
        )
    logger.info(f"Import finished: {len(members)} valid entries loaded from {path}")
    return outcome


def _advance(progress: LineProgress | None, *, accepted: bool) -> None:
    if progress is not None:
        progress.advance(accepted)
