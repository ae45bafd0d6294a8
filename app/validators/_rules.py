"""
app/validators/_rules.py

Shared length/presence rules used by the entity validators.
"""

from __future__ import annotations

from app.domain.validation import ValidationError


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


def check_required_text(
    errors: list[ValidationError],
    *,
    field: str,
    label: str,
    value: str | None,
    min_length: int,
    max_length: int,
) -> None:
    """
    Presence on the trimmed value, length bounds on the raw value.
    """

    if value is None or is_blank(value):
        errors.append(ValidationError(field=field, message=f"{label} is required"))
    elif len(value) < min_length:
        errors.append(
            ValidationError(
                field=field,
                message=f"{label} must be at least {min_length} characters long",
            )
        )
    elif len(value) > max_length:
        errors.append(
            ValidationError(
                field=field,
                message=f"{label} must be less than {max_length} characters",
            )
        )


def check_max_length(
    errors: list[ValidationError],
    *,
    field: str,
    label: str,
    value: str | None,
    max_length: int,
) -> None:
    if value and len(value) > max_length:
        errors.append(
            ValidationError(
                field=field,
                message=f"{label} must be less than {max_length} characters",
            )
        )
