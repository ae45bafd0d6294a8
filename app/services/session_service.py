"""
app/services/session_service.py

Service layer for the event schedule.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from datetime import time
from functools import lru_cache
from typing import Any

from sqlalchemy.orm import Session

from app.config import get_validation_settings
from app.domain.event_inputs import SessionInput
from app.domain.validation import ValidationResult
from app.repositories.event_repository import EventRepository
from app.repositories.session_repository import SessionRepository
from app.services.errors import (
    EntityNotFoundError,
    EntityValidationFailed,
    log_rejection,
    unit_of_work,
)
from app.validators.field_validators import parse_calendar_date, time_to_minutes
from app.validators.session_validator import SessionValidator
from db.models.event import Event
from db.models.event_session import EventSession

logger = logging.getLogger(__name__)


class SessionService:
    """
    Validates sessions against their event's date range before persisting.
    """

    def __init__(
        self,
        *,
        log_validation_errors: bool = True,
        validator: SessionValidator | None = None,
        event_repository_factory: Callable[[Session], EventRepository] = EventRepository,
        session_repository_factory: Callable[[Session], SessionRepository] = SessionRepository,
    ) -> None:
        self._log_validation_errors = log_validation_errors
        self._validator = validator or SessionValidator()
        self._event_repository_factory = event_repository_factory
        self._session_repository_factory = session_repository_factory

    def list_sessions(self, *, db: Session, event_id: uuid.UUID) -> list[EventSession]:
        self._get_event(db, event_id)
        return self._session_repository_factory(db).list_for_event(event_id)

    def validate_session(
        self,
        *,
        db: Session,
        event_id: uuid.UUID,
        session_input: SessionInput,
    ) -> ValidationResult:
        event = self._get_event(db, event_id)
        return self._validate(event, session_input)

    def add_session(
        self,
        *,
        db: Session,
        event_id: uuid.UUID,
        session_input: SessionInput,
    ) -> EventSession:
        result = self.validate_session(db=db, event_id=event_id, session_input=session_input)
        if not result.is_valid:
            if self._log_validation_errors:
                log_rejection("Session", result)
            raise EntityValidationFailed(entity="Session", result=result)

        repository = self._session_repository_factory(db)
        with unit_of_work(db, action="add session"):
            record = repository.create(event_id, _session_values(session_input))
        logger.info("Session added id=%s event_id=%s title=%r", record.id, event_id, record.title)
        return record

    def remove_session(self, *, db: Session, event_id: uuid.UUID, session_id: uuid.UUID) -> None:
        repository = self._session_repository_factory(db)
        record = repository.get(event_id, session_id)
        if record is None:
            raise EntityNotFoundError(entity="Session", entity_id=session_id)
        with unit_of_work(db, action="remove session"):
            repository.delete(record)
        logger.info("Session removed id=%s event_id=%s", session_id, event_id)

    def _get_event(self, db: Session, event_id: uuid.UUID) -> Event:
        event = self._event_repository_factory(db).get(event_id)
        if event is None:
            raise EntityNotFoundError(entity="Event", entity_id=event_id)
        return event

    def _validate(self, event: Event, session_input: SessionInput) -> ValidationResult:
        return self._validator.validate(
            session_input,
            event.start_date.isoformat() if event.start_date else None,
            event.end_date.isoformat() if event.end_date else None,
        )


def _to_time(value: str) -> time:
    minutes = time_to_minutes(value)
    return time(hour=minutes // 60, minute=minutes % 60)


def _session_values(session_input: SessionInput) -> dict[str, Any]:
    """
    Convert a validated session input into column values.
    """

    return {
        "title": (session_input.title or "").strip(),
        "description": session_input.description or None,
        "speaker": session_input.speaker or None,
        "venue": session_input.venue or None,
        "date": parse_calendar_date(session_input.date or ""),
        "start_time": _to_time(session_input.start_time or ""),
        "end_time": _to_time(session_input.end_time or ""),
    }


@lru_cache(maxsize=1)
def get_session_service() -> SessionService:
    return SessionService(log_validation_errors=get_validation_settings().log_validation_errors)
