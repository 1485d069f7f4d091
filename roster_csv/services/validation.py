from __future__ import annotations

import re
from collections.abc import Set
from dataclasses import dataclass, field

from ..models.fields import VALID_YEARS
from ..models.import_outcome import DiagnosticKind

"""Per-field validation rules for roster lines.

Each rule is a pure function from a trimmed cell to ``None`` (pass) or a
``Violation``. ``validate_cells`` runs every rule for a line, in column
order, and collects all violations instead of stopping at the first one.

For student number and phone the format check runs first; the duplicate
check only applies to well-formed values, so a malformed value is never
reported as a duplicate.
"""

__all__ = [
    "Violation",
    "LineValidation",
    "check_name",
    "check_year",
    "check_student_number",
    "check_email",
    "check_phone",
    "check_dietary_requirements",
    "check_role",
    "validate_cells",
]

ALPHA_SPACE_RE = re.compile(r"[A-Za-z ]+")
STUDENT_NUMBER_RE = re.compile(r"[A-Za-z][0-9]{7}[A-Za-z]")
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"[0-9]{8}")


@dataclass(frozen=True)
class Violation:
    kind: DiagnosticKind
    message: str


@dataclass
class LineValidation:
    """Ordered violations found on one line."""
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations

    def add(self, violation: Violation | None) -> None:
        if violation is not None:
            self.violations.append(violation)


def _invalid(message: str) -> Violation:
    return Violation(DiagnosticKind.INVALID_FIELD, message)


def check_name(value: str) -> Violation | None:
    if not value or ALPHA_SPACE_RE.fullmatch(value) is None:
        return _invalid(f"Invalid name ({value})")
    return None


def check_year(value: str) -> Violation | None:
    if value not in VALID_YEARS:
        return _invalid(f"Invalid year ({value})")
    return None


def check_student_number(value: str, seen: Set[str]) -> Violation | None:
    if STUDENT_NUMBER_RE.fullmatch(value) is None:
        return _invalid(f"Invalid student number ({value})")
    if value in seen:
        return Violation(DiagnosticKind.DUPLICATE, f"Duplicate student number ({value})")
    return None


def check_email(value: str) -> Violation | None:
    if EMAIL_RE.fullmatch(value) is None:
        return _invalid(f"Invalid email ({value})")
    return None


def check_phone(value: str, seen: Set[str]) -> Violation | None:
    if PHONE_RE.fullmatch(value) is None:
        return _invalid(f"Invalid phone number ({value})")
    if value in seen:
        return Violation(DiagnosticKind.DUPLICATE, f"Duplicate phone number ({value})")
    return None


def check_dietary_requirements(value: str) -> Violation | None:
    if not value:
        return _invalid("Missing dietary requirements.")
    if ALPHA_SPACE_RE.fullmatch(value) is None:
        return _invalid(f"Invalid dietary requirements ({value})")
    return None


def check_role(value: str) -> Violation | None:
    if not value:
        return _invalid("Missing role.")
    if ALPHA_SPACE_RE.fullmatch(value) is None:
        return _invalid(f"Invalid role ({value})")
    return None


def validate_cells(
    cells: list[str],
    seen_student_numbers: Set[str],
    seen_phones: Set[str],
) -> LineValidation:
    """Run every field rule over the first seven trimmed cells of a line.

    The tags cell (index 7) is not format-checked.
    """
    name, year, student_number, email, phone, diet, role = cells[:7]
    result = LineValidation()
    result.add(check_name(name))
    result.add(check_year(year))
    result.add(check_student_number(student_number, seen_student_numbers))
    result.add(check_email(email))
    result.add(check_phone(phone, seen_phones))
    result.add(check_dietary_requirements(diet))
    result.add(check_role(role))
    return result
