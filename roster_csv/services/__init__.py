"""Import/export services for member rosters."""

from .exporter import export_members, open_in_default_viewer
from .importer import import_members
from .roster import MemberRoster, import_into_roster, render_import_message

__all__ = [
    "MemberRoster",
    "export_members",
    "import_into_roster",
    "import_members",
    "open_in_default_viewer",
    "render_import_message",
]
