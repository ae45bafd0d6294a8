"""
app/schemas/events.py

Request and response schemas for event, schedule, and attendee endpoints.
"""

from __future__ import annotations

import uuid
import datetime as dt

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class ValidationErrorResponse(BaseModel):
    """
    API response model for one field-tagged validation error.
    """

    field: str
    message: str


class ValidationResultResponse(BaseModel):
    is_valid: bool
    errors: list[ValidationErrorResponse] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class EventSetupRequest(BaseModel):
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


class VenueUpdateRequest(BaseModel):
    venue_name: str | None = None
    venue_address: str | None = None
    venue_maps_link: str | None = None


class SessionCreateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    speaker: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    date: str | None = None
    venue: str | None = None


class AttendeeCreateRequest(BaseModel):
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    company: str | None = None
    job_title: str | None = None
    phone: str | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class EventResponse(BaseModel):
    id: uuid.UUID
    name: str
    description: str | None
    start_date: dt.date
    end_date: dt.date
    status: str
    primary_color: str | None
    accent_color: str | None
    venue_name: str | None
    venue_address: str | None
    venue_maps_link: str | None
    organizer_name: str | None
    organizer_email: str | None
    organizer_phone: str | None
    organization_name: str | None
    organization_website: str | None
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class EventOverviewResponse(BaseModel):
    event: EventResponse
    attendee_count: int = Field(..., ge=0)


class SessionResponse(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID
    title: str
    description: str | None
    speaker: str | None
    venue: str | None
    date: dt.date
    start_time: dt.time
    end_time: dt.time

    model_config = {"from_attributes": True}


class AttendeeResponse(BaseModel):
    id: uuid.UUID
    event_id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    company: str | None
    job_title: str | None
    phone: str | None
    created_at: dt.datetime

    model_config = {"from_attributes": True}


class AttendeeImportResponse(BaseModel):
    rows_imported: int = Field(..., ge=0)


class AppLinksResponse(BaseModel):
    app_url: str
    qr_code_url: str
