"""
app/repositories/event_repository.py

Persistence helpers for events.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from db.models.attendee import Attendee
from db.models.event import Event


class EventRepository:
    """
    Repository for CRUD operations on events.

    Methods flush but never commit; the service owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, event_id: uuid.UUID) -> Event | None:
        return self._session.get(Event, event_id)

    def list_all(self) -> list[Event]:
        stmt = select(Event).order_by(Event.created_at.desc())
        return list(self._session.execute(stmt).scalars().all())

    def attendee_counts(self) -> dict[uuid.UUID, int]:
        stmt = select(Attendee.event_id, func.count(Attendee.id)).group_by(Attendee.event_id)
        return {event_id: int(count) for event_id, count in self._session.execute(stmt).all()}

    def create(self, values: dict[str, Any]) -> Event:
        event = Event(**values)
        self._session.add(event)
        self._session.flush()
        return event

    def update(self, event: Event, values: dict[str, Any]) -> Event:
        for key, value in values.items():
            setattr(event, key, value)
        self._session.flush()
        return event

    def delete(self, event: Event) -> None:
        self._session.delete(event)
        self._session.flush()
