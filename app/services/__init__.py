"""
app/services package marker.
"""

from app.services.attendee_service import AttendeeService, get_attendee_service
from app.services.errors import EntityNotFoundError, EntityValidationFailed, PersistenceError
from app.services.event_service import EventService, get_event_service
from app.services.session_service import SessionService, get_session_service

__all__ = [
    "AttendeeService",
    "get_attendee_service",
    "EntityNotFoundError",
    "EntityValidationFailed",
    "PersistenceError",
    "EventService",
    "get_event_service",
    "SessionService",
    "get_session_service",
]
