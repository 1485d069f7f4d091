from __future__ import annotations

import csv
from collections.abc import Iterable

"""Roster file format helpers.

Fixed 8-column schema shared by the importer and the exporter:

    Name,Year,StudentNumber,Email,Phone,DietaryRequirements,Role,Tags

A cell is wrapped in double quotes (internal quotes doubled) only when it
contains a comma or a double quote. Tags live in a single cell, joined with
semicolons.
"""

__all__ = [
    "COLUMNS",
    "HEADER",
    "DEFAULT_FILENAME",
    "DELIMITER",
    "TAG_DELIMITER",
    "escape_cell",
    "split_line",
    "cell_or_default",
    "parse_tags",
    "join_tags",
]

COLUMNS: tuple[str, ...] = (
    "Name",
    "Year",
    "StudentNumber",
    "Email",
    "Phone",
    "DietaryRequirements",
    "Role",
    "Tags",
)
HEADER = ",".join(COLUMNS)
DEFAULT_FILENAME = "members.csv"
DELIMITER = ","
QUOTE = '"'
TAG_DELIMITER = ";"


def escape_cell(value: object) -> str:
    r'''Render one cell, quoting it only when it holds a delimiter or a quote.

    >>> escape_cell("plain")
    'plain'
    >>> escape_cell('a,"b"')
    '"a,""b"""'
    '''
    if value is None:
        return ""
    text = str(value)
    if DELIMITER in text or QUOTE in text:
        return QUOTE + text.replace(QUOTE, QUOTE + QUOTE) + QUOTE
    return text


def split_line(line: str) -> list[str]:
    """Split one physical line into raw cells.

    Unquoted lines split on every comma. A cell written by ``escape_cell``
    (quote-wrapped, quotes doubled) is read back as the original text.
    """
    # csv.reader on a single line never spans records. Its per-field limit
    # (131072 by default) is raised so long tag cells still split.
    if len(line) > csv.field_size_limit():
        csv.field_size_limit(len(line))
    return next(csv.reader([line], delimiter=DELIMITER, quotechar=QUOTE), [])


def cell_or_default(cells: list[str], index: int, default: str = "") -> str:
    """Return the trimmed cell at ``index`` or ``default`` when absent or blank."""
    if index >= len(cells):
        return default
    value = cells[index].strip()
    return value if value else default


def parse_tags(cell: str) -> list[str]:
    """Split a tag cell into labels, dropping brackets and blank entries.

    Order of first appearance is kept; duplicates are removed.
    """
    if not cell:
        return []
    labels: list[str] = []
    for raw in cell.replace("[", "").replace("]", "").split(TAG_DELIMITER):
        label = raw.strip()
        if label and label not in labels:
            labels.append(label)
    return labels


def join_tags(labels: Iterable[str]) -> str:
    """Join tag labels into one cell (sorted so output is deterministic)."""
    return TAG_DELIMITER.join(sorted(labels))
