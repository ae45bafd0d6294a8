"""
Model package exports.

Import all SQLAlchemy models here so metadata registration and Alembic
autogeneration work without extra imports.
"""

from db.models.attendee import Attendee
from db.models.event import Event, EventStatus
from db.models.event_session import EventSession

__all__ = [
    "Attendee",
    "Event",
    "EventSession",
    "EventStatus",
]
