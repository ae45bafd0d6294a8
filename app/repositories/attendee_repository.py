"""
app/repositories/attendee_repository.py

Persistence helpers for event attendees.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from db.models.attendee import Attendee


class AttendeeRepository:
    def __init__(self, session: Session) -> None:
        self._session = session

    def list_for_event(self, event_id: uuid.UUID) -> list[Attendee]:
        stmt = (
            select(Attendee)
            .where(Attendee.event_id == event_id)
            .order_by(Attendee.last_name.asc(), Attendee.first_name.asc())
        )
        return list(self._session.execute(stmt).scalars().all())

    def get(self, event_id: uuid.UUID, attendee_id: uuid.UUID) -> Attendee | None:
        stmt = select(Attendee).where(
            Attendee.id == attendee_id,
            Attendee.event_id == event_id,
        )
        return self._session.execute(stmt).scalars().first()

    def create(self, event_id: uuid.UUID, values: dict[str, Any]) -> Attendee:
        record = Attendee(event_id=event_id, **values)
        self._session.add(record)
        self._session.flush()
        return record

    def create_many(self, event_id: uuid.UUID, rows: Sequence[dict[str, Any]]) -> list[Attendee]:
        """
        Stage all rows in one flush; nothing is written if any row fails.
        """

        records = [Attendee(event_id=event_id, **row) for row in rows]
        if not records:
            return []
        self._session.add_all(records)
        self._session.flush()
        return records

    def delete(self, record: Attendee) -> None:
        self._session.delete(record)
        self._session.flush()
