"""Domain models for the roster CSV engine."""

from .config_models import RosterConfig
from .fields import DietaryRequirements, Email, Name, Phone, Role, StudentNumber, Tag, Year
from .import_outcome import DiagnosticKind, ImportOutcome, LineDiagnostic, render_report
from .member import Member

__all__ = [
    # Configuration
    "RosterConfig",
    # Field types
    "DietaryRequirements",
    "Email",
    "Name",
    "Phone",
    "Role",
    "StudentNumber",
    "Tag",
    "Year",
    # Records
    "Member",
    "DiagnosticKind",
    "ImportOutcome",
    "LineDiagnostic",
    "render_report",
]
