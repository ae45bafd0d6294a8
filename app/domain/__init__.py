"""
app/domain package marker.
"""

from app.domain.event_inputs import AttendeeInput, EventSetupInput, SessionInput, VenueInput
from app.domain.validation import ValidationError, ValidationResult

__all__ = [
    "AttendeeInput",
    "EventSetupInput",
    "SessionInput",
    "ValidationError",
    "ValidationResult",
    "VenueInput",
]
