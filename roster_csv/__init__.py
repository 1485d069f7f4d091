"""Member roster CSV import/export engine.

The importer reads the fixed 8-column roster format, validates every line and
returns the accepted members together with a per-line diagnostic report. The
exporter writes members back in the same format.
"""

__version__ = "0.1.0"
