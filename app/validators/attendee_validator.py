"""
app/validators/attendee_validator.py

Validation for manually added attendees.
"""

from __future__ import annotations

from app.domain.event_inputs import AttendeeInput
from app.domain.validation import ValidationError, ValidationResult
from app.validators._rules import check_max_length, check_required_text, is_blank
from app.validators.field_validators import is_valid_email, is_valid_phone


class AttendeeValidator:
    def validate(self, attendee: AttendeeInput) -> ValidationResult:
        errors: list[ValidationError] = []

        if attendee.email is None or is_blank(attendee.email):
            errors.append(ValidationError(field="email", message="Email is required"))
        elif not is_valid_email(attendee.email):
            errors.append(ValidationError(field="email", message="Please enter a valid email address"))

        check_required_text(
            errors,
            field="first_name",
            label="First name",
            value=attendee.first_name,
            min_length=2,
            max_length=50,
        )
        check_required_text(
            errors,
            field="last_name",
            label="Last name",
            value=attendee.last_name,
            min_length=2,
            max_length=50,
        )

        check_max_length(
            errors,
            field="company",
            label="Company name",
            value=attendee.company,
            max_length=100,
        )
        check_max_length(
            errors,
            field="job_title",
            label="Job title",
            value=attendee.job_title,
            max_length=100,
        )

        if attendee.phone and not is_valid_phone(attendee.phone):
            errors.append(ValidationError(field="phone", message="Please enter a valid phone number"))

        return ValidationResult.from_errors(errors)
