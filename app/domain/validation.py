"""
app/domain/validation.py

Structured validation verdicts returned by every entity validator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """
    One field-tagged validation failure.
    """

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """
    Ordered error list for one validated record.

    ``is_valid`` is derived from ``errors`` and cannot be set independently.
    """

    errors: tuple[ValidationError, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    @classmethod
    def from_errors(cls, errors: list[ValidationError]) -> ValidationResult:
        return cls(errors=tuple(errors))

    def field_errors(self) -> dict[str, str]:
        """
        Map each offending field to its first error message.
        """

        first_by_field: dict[str, str] = {}
        for error in self.errors:
            first_by_field.setdefault(error.field, error.message)
        return first_by_field

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "errors": [{"field": error.field, "message": error.message} for error in self.errors],
        }
