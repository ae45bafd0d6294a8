"""
app/services/attendee_service.py

Service layer for the attendee roster: manual adds and CSV imports.

A CSV import is all-or-nothing at validation time: any layout or row error
rejects the whole blob. Accepted rows are inserted in one commit.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from sqlalchemy.orm import Session

from app.config import get_validation_settings
from app.domain.event_inputs import AttendeeInput
from app.domain.validation import ValidationResult
from app.repositories.attendee_repository import AttendeeRepository
from app.repositories.event_repository import EventRepository
from app.services.errors import (
    EntityNotFoundError,
    EntityValidationFailed,
    log_rejection,
    unit_of_work,
)
from app.validators.attendee_validator import AttendeeValidator
from app.validators.csv_validator import AttendeeCSVValidator
from db.models.attendee import Attendee

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendeeImportSummary:
    rows_imported: int


class AttendeeService:
    """
    Coordinates attendee validation and persistence.
    """

    def __init__(
        self,
        *,
        csv_max_validation_errors: int = 10,
        log_validation_errors: bool = True,
        validator: AttendeeValidator | None = None,
        csv_validator: AttendeeCSVValidator | None = None,
        event_repository_factory: Callable[[Session], EventRepository] = EventRepository,
        attendee_repository_factory: Callable[[Session], AttendeeRepository] = AttendeeRepository,
    ) -> None:
        self._log_validation_errors = log_validation_errors
        self._validator = validator or AttendeeValidator()
        self._csv_validator = csv_validator or AttendeeCSVValidator(max_errors=csv_max_validation_errors)
        self._event_repository_factory = event_repository_factory
        self._attendee_repository_factory = attendee_repository_factory

    def validate_csv(self, csv_text: str) -> ValidationResult:
        """
        Check the CSV layout, then hold every row to the manual-add rules.

        Row-level attendee rules only run once the layout checks pass.
        """

        result = self._csv_validator.validate(csv_text)
        if not result.is_valid:
            return result
        records = self._csv_validator.parse_rows(csv_text)
        return self._csv_validator.validate_records(records, self._validator)

    def list_attendees(self, *, db: Session, event_id: uuid.UUID) -> list[Attendee]:
        self._ensure_event(db, event_id)
        return self._attendee_repository_factory(db).list_for_event(event_id)

    def add_attendee(
        self,
        *,
        db: Session,
        event_id: uuid.UUID,
        attendee_input: AttendeeInput,
    ) -> Attendee:
        self._ensure_valid("Attendee", self._validator.validate(attendee_input))
        self._ensure_event(db, event_id)

        repository = self._attendee_repository_factory(db)
        with unit_of_work(db, action="add attendee"):
            record = repository.create(event_id, _attendee_values(attendee_input))
        logger.info("Attendee added id=%s event_id=%s", record.id, event_id)
        return record

    def import_csv(self, *, db: Session, event_id: uuid.UUID, csv_text: str) -> AttendeeImportSummary:
        self._ensure_valid("CSV", self.validate_csv(csv_text))
        self._ensure_event(db, event_id)

        rows = [_attendee_values(row) for row in self._csv_validator.parse_rows(csv_text)]
        repository = self._attendee_repository_factory(db)
        with unit_of_work(db, action="import attendees"):
            records = repository.create_many(event_id, rows)
        logger.info("Attendees imported event_id=%s rows=%d", event_id, len(records))
        return AttendeeImportSummary(rows_imported=len(records))

    def remove_attendee(self, *, db: Session, event_id: uuid.UUID, attendee_id: uuid.UUID) -> None:
        repository = self._attendee_repository_factory(db)
        record = repository.get(event_id, attendee_id)
        if record is None:
            raise EntityNotFoundError(entity="Attendee", entity_id=attendee_id)
        with unit_of_work(db, action="remove attendee"):
            repository.delete(record)
        logger.info("Attendee removed id=%s event_id=%s", attendee_id, event_id)

    def _ensure_event(self, db: Session, event_id: uuid.UUID) -> None:
        if self._event_repository_factory(db).get(event_id) is None:
            raise EntityNotFoundError(entity="Event", entity_id=event_id)

    def _ensure_valid(self, entity: str, result: ValidationResult) -> None:
        if result.is_valid:
            return
        if self._log_validation_errors:
            log_rejection(entity, result)
        raise EntityValidationFailed(entity=entity, result=result)


def _attendee_values(attendee: AttendeeInput) -> dict[str, Any]:
    return {
        "email": (attendee.email or "").strip(),
        "first_name": (attendee.first_name or "").strip(),
        "last_name": (attendee.last_name or "").strip(),
        "company": attendee.company or None,
        "job_title": attendee.job_title or None,
        "phone": attendee.phone or None,
    }


@lru_cache(maxsize=1)
def get_attendee_service() -> AttendeeService:
    """
    Build and cache the attendee service with env-driven settings.
    """

    settings = get_validation_settings()
    return AttendeeService(
        csv_max_validation_errors=settings.csv_max_validation_errors,
        log_validation_errors=settings.log_validation_errors,
    )
