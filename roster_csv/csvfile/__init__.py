"""Roster file format: header, escaping, line splitting and file access."""

from .errors import EmptyRosterError, ExportError, RosterFileError, RosterNotFoundError, RosterReadError
from .format import COLUMNS, DEFAULT_FILENAME, HEADER, escape_cell, join_tags, parse_tags, split_line

__all__ = [
    "COLUMNS",
    "DEFAULT_FILENAME",
    "HEADER",
    "EmptyRosterError",
    "ExportError",
    "RosterFileError",
    "RosterNotFoundError",
    "RosterReadError",
    "escape_cell",
    "join_tags",
    "parse_tags",
    "split_line",
]
