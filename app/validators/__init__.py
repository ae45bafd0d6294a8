"""
app/validators package marker.
"""

from app.validators.attendee_validator import AttendeeValidator
from app.validators.csv_validator import AttendeeCSVValidator
from app.validators.event_validator import EventSetupValidator
from app.validators.session_validator import SessionValidator
from app.validators.venue_validator import VenueValidator

__all__ = [
    "AttendeeCSVValidator",
    "AttendeeValidator",
    "EventSetupValidator",
    "SessionValidator",
    "VenueValidator",
]
