"""
app/validators/event_validator.py

Validation for the event setup form.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import date, datetime, time, timedelta

from app.domain.event_inputs import EventSetupInput
from app.domain.validation import ValidationError, ValidationResult
from app.validators._rules import check_max_length, check_required_text
from app.validators.field_validators import (
    is_valid_color,
    is_valid_date,
    is_valid_email,
    is_valid_phone,
    is_valid_url,
    parse_timestamp,
)

MAX_EVENT_DURATION_DAYS = 365

Clock = Callable[[], date]


class EventSetupValidator:
    """
    Validates event name, date range, branding, and organizer details.

    ``clock`` returns the current calendar date; the start-date-in-the-past rule
    is the only check that depends on it.
    """

    def __init__(self, *, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or date.today

    def validate(self, event: EventSetupInput) -> ValidationResult:
        errors: list[ValidationError] = []

        check_required_text(
            errors,
            field="name",
            label="Event name",
            value=event.name,
            min_length=3,
            max_length=100,
        )

        start_ok = self._check_date(
            errors,
            field="start_date",
            value=event.start_date,
            missing="Start date is required",
            invalid="Please enter a valid start date",
        )
        end_ok = self._check_date(
            errors,
            field="end_date",
            value=event.end_date,
            missing="End date is required",
            invalid="Please enter a valid end date",
        )
        if start_ok and end_ok:
            self._check_date_range(errors, start_raw=event.start_date, end_raw=event.end_date)

        check_max_length(
            errors,
            field="description",
            label="Description",
            value=event.description,
            max_length=500,
        )

        if event.organizer_email and not is_valid_email(event.organizer_email):
            errors.append(
                ValidationError(field="organizer_email", message="Please enter a valid email address")
            )
        if event.organizer_phone and not is_valid_phone(event.organizer_phone):
            errors.append(
                ValidationError(field="organizer_phone", message="Please enter a valid phone number")
            )
        if event.organization_website and not is_valid_url(event.organization_website):
            errors.append(
                ValidationError(
                    field="organization_website",
                    message="Please enter a valid website URL",
                )
            )

        for color_field in ("primary_color", "accent_color"):
            color = getattr(event, color_field)
            if color and not is_valid_color(color):
                errors.append(
                    ValidationError(field=color_field, message="Please enter a valid hex color code")
                )

        check_max_length(
            errors,
            field="organization_name",
            label="Organization name",
            value=event.organization_name,
            max_length=100,
        )
        check_max_length(
            errors,
            field="organizer_name",
            label="Organizer name",
            value=event.organizer_name,
            max_length=100,
        )

        return ValidationResult.from_errors(errors)

    @staticmethod
    def _check_date(
        errors: list[ValidationError],
        *,
        field: str,
        value: str | None,
        missing: str,
        invalid: str,
    ) -> bool:
        if not value:
            errors.append(ValidationError(field=field, message=missing))
            return False
        if not is_valid_date(value):
            errors.append(ValidationError(field=field, message=invalid))
            return False
        return True

    def _check_date_range(
        self,
        errors: list[ValidationError],
        *,
        start_raw: str | None,
        end_raw: str | None,
    ) -> None:
        start = parse_timestamp(start_raw or "")
        end = parse_timestamp(end_raw or "")
        if start is None or end is None:
            return

        if start < datetime.combine(self._clock(), time.min):
            errors.append(ValidationError(field="start_date", message="Start date cannot be in the past"))

        if end < start:
            errors.append(ValidationError(field="end_date", message="End date must be after start date"))

        # Partial days count as a whole day.
        if math.ceil((end - start) / timedelta(days=1)) > MAX_EVENT_DURATION_DAYS:
            errors.append(
                ValidationError(
                    field="end_date",
                    message=f"Event duration cannot exceed {MAX_EVENT_DURATION_DAYS} days",
                )
            )
