from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Line progress display with tqdm (TTY only).

In non-TTY environments (CI, pipes) no bar is created so no ANSI control
sequences end up in captured output.
"""

__all__ = [
    "LineProgress",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Return True if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class LineProgress:
    """Progress bar over the data lines of one roster file."""

    def __init__(self, total_lines: int | None = None, *, description: str = "Importing") -> None:
        self.description = description
        self.accepted = 0
        self.rejected = 0

        self.enabled = is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_lines,
                desc=description,
                unit="line",
                leave=False,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def set_total(self, total_lines: int) -> None:
        if self.pbar is not None:
            self.pbar.total = total_lines
            self.pbar.refresh()

    def advance(self, accepted: bool) -> None:
        """Record one processed data line."""
        if accepted:
            self.accepted += 1
        else:
            self.rejected += 1
        if self.pbar is not None:
            self.pbar.update(1)
            self.pbar.set_postfix(ok=self.accepted, skipped=self.rejected)

    def close(self) -> None:
        if self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> LineProgress:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
