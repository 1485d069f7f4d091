from __future__ import annotations

from dataclasses import dataclass

from ..csvfile.format import DEFAULT_FILENAME

"""Configuration dataclass for roster import/export."""

__all__ = [
    "RosterConfig",
]


@dataclass(frozen=True)
class RosterConfig:
    """Root configuration object.

    The engine itself never reads this; callers resolve paths and options from
    it before invoking the importer or exporter.
    """
    default_path: str = DEFAULT_FILENAME  # used when no path is supplied (cwd-relative)
    encoding: str = "utf-8"
    open_after_export: bool = True  # best-effort viewer hook after export
    show_progress: bool = True  # tqdm line progress (TTY only)
    error_log_dir: str | None = None  # JSON Lines diagnostic log directory, None = disabled
