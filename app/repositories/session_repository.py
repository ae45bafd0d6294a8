"""
app/repositories/session_repository.py

Persistence helpers for event schedule sessions.
"""

from __future__ import annotations

import uuid
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.event_session import EventSession


class SessionRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_event(self, event_id: uuid.UUID) -> list[EventSession]:
        """
        Return the event schedule ordered by date, then start time.
        """

        stmt = (
            select(EventSession)
            .where(EventSession.event_id == event_id)
            .order_by(EventSession.date.asc(), EventSession.start_time.asc())
        )
        return list(self._session.execute(stmt).scalars().all())

    def get(self, event_id: uuid.UUID, session_id: uuid.UUID) -> EventSession | None:
        stmt = select(EventSession).where(
            EventSession.id == session_id,
            EventSession.event_id == event_id,
        )
        return self._session.execute(stmt).scalars().first()

    def create(self, event_id: uuid.UUID, values: dict[str, Any]) -> EventSession:
        record = EventSession(event_id=event_id, **values)
        self._session.add(record)
        self._session.flush()
        return record

    def delete(self, record: EventSession) -> None:
        self._session.delete(record)
        self._session.flush()
