"""
app/validators/venue_validator.py

Validation for partial venue updates. Every field is optional.
"""

from __future__ import annotations

from app.domain.event_inputs import VenueInput
from app.domain.validation import ValidationError, ValidationResult
from app.validators._rules import check_max_length
from app.validators.field_validators import is_valid_url


class VenueValidator:
    def validate(self, venue: VenueInput) -> ValidationResult:
        errors: list[ValidationError] = []

        check_max_length(
            errors,
            field="venue_name",
            label="Venue name",
            value=venue.venue_name,
            max_length=200,
        )
        check_max_length(
            errors,
            field="venue_address",
            label="Venue address",
            value=venue.venue_address,
            max_length=500,
        )
        if venue.venue_maps_link and not is_valid_url(venue.venue_maps_link):
            errors.append(
                ValidationError(field="venue_maps_link", message="Please enter a valid Google Maps URL")
            )

        return ValidationResult.from_errors(errors)
