"""
Shared fakes for service and router tests.

The fake repositories keep rows in memory so no database is needed.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime, timezone
from typing import Any
from unittest.mock import MagicMock

import pytest

from app.config import AppLinkSettings
from app.services.attendee_service import AttendeeService
from app.services.event_service import EventService
from app.services.session_service import SessionService
from db.models.attendee import Attendee
from db.models.event import Event
from db.models.event_session import EventSession

FIXED_TODAY = date(2026, 10, 18)


def _stamp(record: Any) -> Any:
    record.id = uuid.uuid4()
    record.created_at = datetime(2026, 10, 18, 9, 0, tzinfo=timezone.utc)
    return record


class FakeStore:
    def __init__(self) -> None:
        self.events: dict[uuid.UUID, Event] = {}
        self.sessions: dict[uuid.UUID, EventSession] = {}
        self.attendees: dict[uuid.UUID, Attendee] = {}


class FakeEventRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def get(self, event_id: uuid.UUID) -> Event | None:
        return self._store.events.get(event_id)

    def list_all(self) -> list[Event]:
        return list(self._store.events.values())

    def attendee_counts(self) -> dict[uuid.UUID, int]:
        counts: dict[uuid.UUID, int] = {}
        for attendee in self._store.attendees.values():
            counts[attendee.event_id] = counts.get(attendee.event_id, 0) + 1
        return counts

    def create(self, values: dict[str, Any]) -> Event:
        event = _stamp(Event(**values))
        self._store.events[event.id] = event
        return event

    def update(self, event: Event, values: dict[str, Any]) -> Event:
        for key, value in values.items():
            setattr(event, key, value)
        return event

    def delete(self, event: Event) -> None:
        self._store.events.pop(event.id, None)


class FakeSessionRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def list_for_event(self, event_id: uuid.UUID) -> list[EventSession]:
        rows = [row for row in self._store.sessions.values() if row.event_id == event_id]
        return sorted(rows, key=lambda row: (row.date, row.start_time))

    def get(self, event_id: uuid.UUID, session_id: uuid.UUID) -> EventSession | None:
        row = self._store.sessions.get(session_id)
        return row if row is not None and row.event_id == event_id else None

    def create(self, event_id: uuid.UUID, values: dict[str, Any]) -> EventSession:
        row = _stamp(EventSession(event_id=event_id, **values))
        self._store.sessions[row.id] = row
        return row

    def delete(self, record: EventSession) -> None:
        self._store.sessions.pop(record.id, None)


class FakeAttendeeRepository:
    def __init__(self, store: FakeStore) -> None:
        self._store = store

    def list_for_event(self, event_id: uuid.UUID) -> list[Attendee]:
        return [row for row in self._store.attendees.values() if row.event_id == event_id]

    def get(self, event_id: uuid.UUID, attendee_id: uuid.UUID) -> Attendee | None:
        row = self._store.attendees.get(attendee_id)
        return row if row is not None and row.event_id == event_id else None

    def create(self, event_id: uuid.UUID, values: dict[str, Any]) -> Attendee:
        row = _stamp(Attendee(event_id=event_id, **values))
        self._store.attendees[row.id] = row
        return row

    def create_many(self, event_id: uuid.UUID, rows: list[dict[str, Any]]) -> list[Attendee]:
        return [self.create(event_id, row) for row in rows]

    def delete(self, record: Attendee) -> None:
        self._store.attendees.pop(record.id, None)


@pytest.fixture()
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture()
def db() -> MagicMock:
    return MagicMock(name="db_session")


@pytest.fixture()
def link_settings() -> AppLinkSettings:
    return AppLinkSettings(
        public_base_url="https://app.example.com",
        qr_code_service_url="https://qr.example.com/create/",
        qr_code_size=200,
    )


@pytest.fixture()
def event_service(store: FakeStore, link_settings: AppLinkSettings) -> EventService:
    return EventService(
        link_settings=link_settings,
        clock=lambda: FIXED_TODAY,
        repository_factory=lambda _db: FakeEventRepository(store),
    )


@pytest.fixture()
def session_service(store: FakeStore) -> SessionService:
    return SessionService(
        event_repository_factory=lambda _db: FakeEventRepository(store),
        session_repository_factory=lambda _db: FakeSessionRepository(store),
    )


@pytest.fixture()
def attendee_service(store: FakeStore) -> AttendeeService:
    return AttendeeService(
        event_repository_factory=lambda _db: FakeEventRepository(store),
        attendee_repository_factory=lambda _db: FakeAttendeeRepository(store),
    )


@pytest.fixture()
def saved_event(store: FakeStore) -> Event:
    return FakeEventRepository(store).create(
        {
            "name": "PyCon Berlin",
            "description": None,
            "start_date": date(2026, 11, 2),
            "end_date": date(2026, 11, 4),
            "status": "draft",
        }
    )
