"""
app/services/event_service.py

Service layer for event setup, venue details, and app publishing.

Every mutation runs the matching validator first. A rejected record raises
EntityValidationFailed and never reaches the repository.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from functools import lru_cache
from typing import Any

from sqlalchemy.orm import Session

from app.config import AppLinkSettings, get_app_link_settings, get_validation_settings
from app.domain.app_links import AppLinks, build_app_links
from app.domain.event_inputs import EventSetupInput, VenueInput
from app.domain.validation import ValidationResult
from app.repositories.event_repository import EventRepository
from app.services.errors import (
    EntityNotFoundError,
    EntityValidationFailed,
    log_rejection,
    unit_of_work,
)
from app.validators.event_validator import Clock, EventSetupValidator
from app.validators.field_validators import parse_calendar_date
from app.validators.venue_validator import VenueValidator
from db.models.event import Event, EventStatus

logger = logging.getLogger(__name__)

DEFAULT_EVENT_NAME = "New Conference"
DEFAULT_EVENT_DESCRIPTION = "Conference description"


@dataclass(frozen=True)
class EventOverview:
    """
    Dashboard row: one event plus its roster size.
    """

    event: Event
    attendee_count: int


class EventService:
    """
    Coordinates event validation and persistence.
    """

    def __init__(
        self,
        *,
        link_settings: AppLinkSettings,
        log_validation_errors: bool = True,
        clock: Clock | None = None,
        event_validator: EventSetupValidator | None = None,
        venue_validator: VenueValidator | None = None,
        repository_factory: Callable[[Session], EventRepository] = EventRepository,
    ) -> None:
        self._link_settings = link_settings
        self._log_validation_errors = log_validation_errors
        self._clock: Clock = clock or date.today
        self._event_validator = event_validator or EventSetupValidator(clock=self._clock)
        self._venue_validator = venue_validator or VenueValidator()
        self._repository_factory = repository_factory

    def validate_event(self, event_input: EventSetupInput) -> ValidationResult:
        """
        Dry-run the event setup rules without touching the store.
        """

        return self._event_validator.validate(event_input)

    def list_events(self, *, db: Session) -> list[EventOverview]:
        repository = self._repository_factory(db)
        counts = repository.attendee_counts()
        return [
            EventOverview(event=event, attendee_count=counts.get(event.id, 0))
            for event in repository.list_all()
        ]

    def get_event(self, *, db: Session, event_id: uuid.UUID) -> Event:
        event = self._repository_factory(db).get(event_id)
        if event is None:
            raise EntityNotFoundError(entity="Event", entity_id=event_id)
        return event

    def create_event(self, *, db: Session, event_input: EventSetupInput) -> Event:
        self._ensure_valid("Event", self._event_validator.validate(event_input))

        repository = self._repository_factory(db)
        with unit_of_work(db, action="create event"):
            event = repository.create(
                {**_event_values(event_input), "status": EventStatus.DRAFT}
            )
        logger.info("Event created id=%s name=%r", event.id, event.name)
        return event

    def create_default_event(self, *, db: Session) -> Event:
        """
        Create a draft event starting today and ending tomorrow.
        """

        today = self._clock()
        repository = self._repository_factory(db)
        with unit_of_work(db, action="create event"):
            event = repository.create(
                {
                    "name": DEFAULT_EVENT_NAME,
                    "description": DEFAULT_EVENT_DESCRIPTION,
                    "start_date": today,
                    "end_date": today + timedelta(days=1),
                    "status": EventStatus.DRAFT,
                }
            )
        logger.info("Default event created id=%s", event.id)
        return event

    def update_event(
        self,
        *,
        db: Session,
        event_id: uuid.UUID,
        event_input: EventSetupInput,
    ) -> Event:
        self._ensure_valid("Event", self._event_validator.validate(event_input))

        repository = self._repository_factory(db)
        event = self.get_event(db=db, event_id=event_id)
        values = _event_values(event_input)
        if event.status == EventStatus.DRAFT:
            values["status"] = EventStatus.CONFIGURED
        with unit_of_work(db, action="update event"):
            repository.update(event, values)
        logger.info("Event updated id=%s status=%s", event.id, event.status)
        return event

    def update_venue(
        self,
        *,
        db: Session,
        event_id: uuid.UUID,
        venue_input: VenueInput,
    ) -> Event:
        """
        Apply only the venue fields present in ``venue_input``.
        """

        self._ensure_valid("Venue", self._venue_validator.validate(venue_input))

        repository = self._repository_factory(db)
        event = self.get_event(db=db, event_id=event_id)
        values = {key: _blank_to_none(value) for key, value in venue_input.present_fields().items()}
        with unit_of_work(db, action="update venue"):
            repository.update(event, values)
        logger.info("Venue updated event_id=%s fields=%s", event.id, sorted(values))
        return event

    def publish_event(self, *, db: Session, event_id: uuid.UUID) -> AppLinks:
        """
        Mark the event app as published and return its public links.
        """

        repository = self._repository_factory(db)
        event = self.get_event(db=db, event_id=event_id)
        with unit_of_work(db, action="publish event"):
            repository.update(event, {"status": EventStatus.PUBLISHED})
        links = build_app_links(str(event.id), self._link_settings)
        logger.info("Event published id=%s app_url=%s", event.id, links.app_url)
        return links

    def app_links(self, *, db: Session, event_id: uuid.UUID) -> AppLinks:
        event = self.get_event(db=db, event_id=event_id)
        return build_app_links(str(event.id), self._link_settings)

    def delete_event(self, *, db: Session, event_id: uuid.UUID) -> None:
        repository = self._repository_factory(db)
        event = self.get_event(db=db, event_id=event_id)
        with unit_of_work(db, action="delete event"):
            repository.delete(event)
        logger.info("Event deleted id=%s", event_id)

    def _ensure_valid(self, entity: str, result: ValidationResult) -> None:
        if result.is_valid:
            return
        if self._log_validation_errors:
            log_rejection(entity, result)
        raise EntityValidationFailed(entity=entity, result=result)


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def _event_values(event_input: EventSetupInput) -> dict[str, Any]:
    """
    Convert a validated event input into column values.
    """

    return {
        "name": (event_input.name or "").strip(),
        "description": _blank_to_none(event_input.description),
        "start_date": parse_calendar_date(event_input.start_date or ""),
        "end_date": parse_calendar_date(event_input.end_date or ""),
        "primary_color": _blank_to_none(event_input.primary_color),
        "accent_color": _blank_to_none(event_input.accent_color),
        "organizer_name": _blank_to_none(event_input.organizer_name),
        "organizer_email": _blank_to_none(event_input.organizer_email),
        "organizer_phone": _blank_to_none(event_input.organizer_phone),
        "organization_name": _blank_to_none(event_input.organization_name),
        "organization_website": _blank_to_none(event_input.organization_website),
    }


@lru_cache(maxsize=1)
def get_event_service() -> EventService:
    """
    Build and cache the event service with env-driven settings.
    """

    return EventService(
        link_settings=get_app_link_settings(),
        log_validation_errors=get_validation_settings().log_validation_errors,
    )
