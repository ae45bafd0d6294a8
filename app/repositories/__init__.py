"""
app/repositories package marker.
"""

from app.repositories.attendee_repository import AttendeeRepository
from app.repositories.event_repository import EventRepository
from app.repositories.session_repository import SessionRepository

__all__ = [
    "AttendeeRepository",
    "EventRepository",
    "SessionRepository",
]
