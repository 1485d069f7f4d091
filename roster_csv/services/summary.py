from __future__ import annotations

from .roster import ImportSummary

"""SUMMARY line rendering.

Format:
SUMMARY accepted={accepted} added={added} duplicates={duplicates} diagnostics={diagnostics}
"""

SUMMARY_LABEL = "SUMMARY"


def render_summary_fields(summary: ImportSummary) -> str:
    """Render the counters of a SUMMARY line, without the label.

    Examples:
        >>> s = ImportSummary(accepted=3, added=2, duplicates=1, report="", diagnostics=0)
        >>> render_summary_fields(s)
        'accepted=3 added=2 duplicates=1 diagnostics=0'
    """
    return (
        f"accepted={summary.accepted} "
        f"added={summary.added} "
        f"duplicates={summary.duplicates} "
        f"diagnostics={summary.diagnostics}"
    )


def render_summary_line(summary: ImportSummary) -> str:
    """Render a SUMMARY line for one import run.

    Examples:
        >>> s = ImportSummary(accepted=3, added=2, duplicates=1, report="", diagnostics=0)
        >>> render_summary_line(s)
        'SUMMARY accepted=3 added=2 duplicates=1 diagnostics=0'
    """
    return f"{SUMMARY_LABEL} {render_summary_fields(summary)}"
