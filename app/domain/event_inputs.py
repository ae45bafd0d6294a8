"""
app/domain/event_inputs.py

Candidate records collected from organizer forms before validation.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, TypeVar

_InputT = TypeVar("_InputT")


def _from_mapping(cls: type[_InputT], data: Mapping[str, Any]) -> _InputT:
    known = {item.name for item in fields(cls)}  # type: ignore[arg-type]
    values = {
        key: (None if value is None else str(value))
        for key, value in data.items()
        if key in known
    }
    return cls(**values)


@dataclass(frozen=True)
class EventSetupInput:
    """
    Event branding, schedule bounds, and organizer contact details.
    """

    name: str | None = None
    description: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    primary_color: str | None = None
    accent_color: str | None = None
    organizer_name: str | None = None
    organizer_email: str | None = None
    organizer_phone: str | None = None
    organization_name: str | None = None
    organization_website: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> EventSetupInput:
        return _from_mapping(cls, data)


@dataclass(frozen=True)
class SessionInput:
    """
    One scheduled agenda item.
    """

    title: str | None = None
    description: str | None = None
    speaker: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    date: str | None = None
    venue: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SessionInput:
        return _from_mapping(cls, data)


@dataclass(frozen=True)
class AttendeeInput:
    """
    One attendee roster entry.
    """

    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    job_title: str | None = None
    phone: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AttendeeInput:
        return _from_mapping(cls, data)


@dataclass(frozen=True)
class VenueInput:
    """
    Partial venue details edited from the venue panel.
    """

    venue_name: str | None = None
    venue_address: str | None = None
    venue_maps_link: str | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> VenueInput:
        return _from_mapping(cls, data)

    def present_fields(self) -> dict[str, str]:
        """
        Return only the venue fields the caller actually supplied.
        """

        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }
