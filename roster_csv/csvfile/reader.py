from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import EmptyRosterError, RosterNotFoundError, RosterReadError

"""Roster file reader.

Line 1 is the header and is discarded without validation. Data lines keep
their physical 1-based line number (first data line = 2) so diagnostics can
point back into the file. Blank lines are dropped here but still consume a
line number.
"""

__all__ = [
    "DataLine",
    "read_data_lines",
]


@dataclass(frozen=True)
class DataLine:
    """One non-blank physical line after the header."""
    line_number: int  # 1-based, header = 1
    text: str


def read_data_lines(path: Path, encoding: str = "utf-8") -> list[DataLine]:
    """Read ``path`` and return its non-blank data lines.

    Raises:
        RosterNotFoundError: ``path`` is not an existing file
        EmptyRosterError: the file has no header line
        RosterReadError: the file cannot be opened or decoded with ``encoding``
    """
    if not path.is_file():
        raise RosterNotFoundError(path)

    lines: list[DataLine] = []
    try:
        with path.open("r", encoding=encoding) as f:
            header = f.readline()
            if header == "":
                raise EmptyRosterError(path)
            for line_number, raw in enumerate(f, start=2):
                text = raw.rstrip("\n")
                if not text.strip():
                    continue
                lines.append(DataLine(line_number=line_number, text=text))
    except UnicodeDecodeError as e:
        raise RosterReadError(f"CSV file is not valid {encoding}: {path} ({e.reason})") from e
    except LookupError as e:
        raise RosterReadError(f"unknown encoding {encoding!r} for {path}") from e
    except OSError as e:
        raise RosterReadError(f"cannot read CSV file {path}: {e}") from e
    return lines
