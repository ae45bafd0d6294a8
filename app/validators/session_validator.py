"""
app/validators/session_validator.py

Validation for agenda sessions, optionally bounded by the event date range.
"""

from __future__ import annotations

from app.domain.event_inputs import SessionInput
from app.domain.validation import ValidationError, ValidationResult
from app.validators._rules import check_max_length, check_required_text
from app.validators.field_validators import (
    is_valid_date,
    is_valid_time,
    parse_calendar_date,
    time_to_minutes,
)

MIN_SESSION_MINUTES = 15
MAX_SESSION_MINUTES = 8 * 60


class SessionValidator:
    """
    Validates session title, time slot, date, and free-text fields.
    """

    def validate(
        self,
        session: SessionInput,
        event_start_date: str | None = None,
        event_end_date: str | None = None,
    ) -> ValidationResult:
        errors: list[ValidationError] = []

        check_required_text(
            errors,
            field="title",
            label="Session title",
            value=session.title,
            min_length=3,
            max_length=200,
        )

        start_ok = self._check_time(
            errors,
            field="start_time",
            value=session.start_time,
            missing="Start time is required",
            invalid="Please enter a valid start time",
        )
        end_ok = self._check_time(
            errors,
            field="end_time",
            value=session.end_time,
            missing="End time is required",
            invalid="Please enter a valid end time",
        )

        date_ok = True
        if not session.date:
            errors.append(ValidationError(field="date", message="Session date is required"))
            date_ok = False
        elif not is_valid_date(session.date):
            errors.append(ValidationError(field="date", message="Please enter a valid date"))
            date_ok = False

        if start_ok and end_ok:
            self._check_time_range(
                errors,
                start_minutes=time_to_minutes(session.start_time or ""),
                end_minutes=time_to_minutes(session.end_time or ""),
            )

        if date_ok and event_start_date and event_end_date:
            self._check_event_range(
                errors,
                session_date=session.date or "",
                event_start_date=event_start_date,
                event_end_date=event_end_date,
            )

        check_max_length(
            errors,
            field="description",
            label="Description",
            value=session.description,
            max_length=500,
        )
        check_max_length(
            errors,
            field="speaker",
            label="Speaker name",
            value=session.speaker,
            max_length=100,
        )
        check_max_length(
            errors,
            field="venue",
            label="Venue name",
            value=session.venue,
            max_length=100,
        )

        return ValidationResult.from_errors(errors)

    @staticmethod
    def _check_time(
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
        if not is_valid_time(value):
            errors.append(ValidationError(field=field, message=invalid))
            return False
        return True

    @staticmethod
    def _check_time_range(
        errors: list[ValidationError],
        *,
        start_minutes: int,
        end_minutes: int,
    ) -> None:
        if end_minutes <= start_minutes:
            errors.append(ValidationError(field="end_time", message="End time must be after start time"))
            return

        duration = end_minutes - start_minutes
        if duration < MIN_SESSION_MINUTES:
            errors.append(
                ValidationError(
                    field="end_time",
                    message=f"Session must be at least {MIN_SESSION_MINUTES} minutes long",
                )
            )
        if duration > MAX_SESSION_MINUTES:
            errors.append(
                ValidationError(field="end_time", message="Session cannot be longer than 8 hours")
            )

    @staticmethod
    def _check_event_range(
        errors: list[ValidationError],
        *,
        session_date: str,
        event_start_date: str,
        event_end_date: str,
    ) -> None:
        day = parse_calendar_date(session_date)
        start = parse_calendar_date(event_start_date)
        end = parse_calendar_date(event_end_date)
        if day is None or start is None or end is None:
            return

        if day < start or day > end:
            errors.append(
                ValidationError(field="date", message="Session date must be within the event date range")
            )
