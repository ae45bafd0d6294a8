"""
app/schemas package marker.
"""

from app.schemas.events import (
    AppLinksResponse,
    AttendeeCreateRequest,
    AttendeeImportResponse,
    AttendeeResponse,
    EventOverviewResponse,
    EventResponse,
    EventSetupRequest,
    SessionCreateRequest,
    SessionResponse,
    ValidationErrorResponse,
    ValidationResultResponse,
    VenueUpdateRequest,
)

__all__ = [
    "AppLinksResponse",
    "AttendeeCreateRequest",
    "AttendeeImportResponse",
    "AttendeeResponse",
    "EventOverviewResponse",
    "EventResponse",
    "EventSetupRequest",
    "SessionCreateRequest",
    "SessionResponse",
    "ValidationErrorResponse",
    "ValidationResultResponse",
    "VenueUpdateRequest",
]
