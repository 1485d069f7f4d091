from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

"""Typed member field value objects.

Every field wraps a single string and checks its own invariant on
construction, raising ``ValueError`` with ``MESSAGE_CONSTRAINTS`` when the
value is rejected. The importer validates raw cells before reaching these
constructors; the constructors still guard values created elsewhere and a few
constraints the line validators do not look at (e.g. email length limits).
"""

__all__ = [
    "Name",
    "Year",
    "StudentNumber",
    "Email",
    "Phone",
    "DietaryRequirements",
    "Role",
    "Tag",
    "VALID_YEARS",
]

ALPHA_SPACE_RE = re.compile(r"[A-Za-z][A-Za-z ]*")
STUDENT_NUMBER_RE = re.compile(r"[A-Za-z][0-9]{7}[A-Za-z]")
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE_RE = re.compile(r"[0-9]{8}")

VALID_YEARS = frozenset({"1", "2", "3", "4", "Year 1", "Year 2", "Year 3", "Year 4"})

# RFC 5321 path limits
MAX_EMAIL_LENGTH = 254
MAX_EMAIL_LOCAL_LENGTH = 64


@dataclass(frozen=True)
class _Field:
    value: str

    MESSAGE_CONSTRAINTS: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid(self.value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid(cls, value: str) -> bool:  # pragma: no cover (overridden)
        raise NotImplementedError

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Name(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Names should only contain letters and spaces, and it should not be blank"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return ALPHA_SPACE_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Year(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Year should be one of 1, 2, 3, 4 or Year 1, Year 2, Year 3, Year 4"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in VALID_YEARS


@dataclass(frozen=True)
class StudentNumber(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Student numbers should be one letter, seven digits and one letter, e.g. A1234567B"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return STUDENT_NUMBER_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Email(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Emails should be of the format local-part@domain, at most "
        f"{MAX_EMAIL_LENGTH} characters with a local part of at most {MAX_EMAIL_LOCAL_LENGTH}"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        if EMAIL_RE.fullmatch(value) is None:
            return False
        local, _, _ = value.partition("@")
        return len(value) <= MAX_EMAIL_LENGTH and len(local) <= MAX_EMAIL_LOCAL_LENGTH


@dataclass(frozen=True)
class Phone(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = "Phone numbers should be exactly 8 digits"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return PHONE_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class DietaryRequirements(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Dietary requirements should only contain letters and spaces, and it should not be blank"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return ALPHA_SPACE_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Role(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Roles should only contain letters and spaces, and it should not be blank"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return ALPHA_SPACE_RE.fullmatch(value) is not None


@dataclass(frozen=True)
class Tag(_Field):
    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Tags should not be blank, padded with spaces, or contain ';', '[' or ']'"
    )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        if not value or value != value.strip():
            return False
        return not any(c in value for c in ";[]")
