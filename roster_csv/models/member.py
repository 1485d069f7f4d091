from __future__ import annotations

from dataclasses import dataclass, field

from .fields import DietaryRequirements, Email, Name, Phone, Role, StudentNumber, Tag, Year

"""Member record.

A Member is built only after every cell of a roster line has passed
validation. It is never mutated after construction.
"""

__all__ = [
    "Member",
]


@dataclass(frozen=True)
class Member:
    """One validated roster entry (eight fields, tags as a set)."""
    name: Name
    year: Year
    student_number: StudentNumber
    email: Email
    phone: Phone
    dietary_requirements: DietaryRequirements
    role: Role
    tags: frozenset[Tag] = field(default_factory=frozenset)

    @classmethod
    def from_strings(
        cls,
        name: str,
        year: str,
        student_number: str,
        email: str,
        phone: str,
        dietary_requirements: str,
        role: str,
        tags: list[str] | None = None,
    ) -> Member:
        """Build a Member from raw strings.

        Raises:
            ValueError: a field constructor rejected its value
        """
        return cls(
            name=Name(name),
            year=Year(year),
            student_number=StudentNumber(student_number),
            email=Email(email),
            phone=Phone(phone),
            dietary_requirements=DietaryRequirements(dietary_requirements),
            role=Role(role),
            tags=frozenset(Tag(t) for t in tags or ()),
        )

    def is_same_member(self, other: Member) -> bool:
        """Store-level identity: two members are the same if their student numbers match."""
        return self.student_number == other.student_number

    @property
    def tag_names(self) -> list[str]:
        return sorted(t.value for t in self.tags)
