from __future__ import annotations

import logging
import os
import subprocess
import sys
from collections.abc import Callable, Iterable
from pathlib import Path

from ..csvfile.errors import ExportError
from ..csvfile.format import DELIMITER, HEADER, escape_cell, join_tags
from ..models.member import Member

"""Roster exporter.

Writes the fixed header followed by one line per member, in input order.
Every cell, including the joined tag cell, is escaped independently.
"""

__all__ = [
    "ExportHook",
    "export_members",
    "format_member",
    "open_in_default_viewer",
]

logger = logging.getLogger(__name__)

ExportHook = Callable[[Path], None]

LINE_END = "\n"


def format_member(member: Member) -> str:
    """Render one member as a roster line (without line terminator)."""
    cells = (
        member.name.value,
        member.year.value,
        member.student_number.value,
        member.email.value,
        member.phone.value,
        member.dietary_requirements.value,
        member.role.value,
        join_tags(t.value for t in member.tags),
    )
    return DELIMITER.join(escape_cell(c) for c in cells)


def export_members(
    members: Iterable[Member],
    path: Path,
    *,
    encoding: str = "utf-8",
    on_exported: ExportHook | None = None,
) -> Path:
    """Write ``members`` to ``path`` and return the path written.

    Missing parent directories are created and an existing file is
    overwritten. ``on_exported`` runs after a successful write; its failures
    are logged and never change the result.

    Raises:
        ExportError: directory creation or writing failed
    """
    count = 0
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding=encoding, newline="") as f:
            f.write(HEADER + LINE_END)
            for member in members:
                f.write(format_member(member) + LINE_END)
                count += 1
    except (OSError, LookupError, UnicodeEncodeError) as e:
        raise ExportError(f"Failed to export members to {path}: {e}") from e

    logger.info(f"Export successful: {count} member(s) written to {path}")

    if on_exported is not None:
        try:
            on_exported(path)
        except Exception as e:
            logger.warning(f"post-export hook failed for {path}: {e}")
    return path


def open_in_default_viewer(path: Path) -> None:
    """Best-effort: open ``path`` with the desktop's default application."""
    try:
        if sys.platform.startswith("win"):
            os.startfile(str(path))  # type: ignore[attr-defined]
        elif sys.platform == "darwin":
            subprocess.run(["open", str(path)], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
        else:
            subprocess.run(["xdg-open", str(path)], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL, check=False)
    except OSError as e:
        logger.info(f"Export complete, but unable to open file automatically. ({e})")
