"""
app/api/routers/events.py

Event setup, venue, and publishing endpoints.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.api.errors import ServiceError, to_http_exception
from app.domain.event_inputs import EventSetupInput, VenueInput
from app.schemas.events import (
    AppLinksResponse,
    EventOverviewResponse,
    EventResponse,
    EventSetupRequest,
    ValidationErrorResponse,
    ValidationResultResponse,
    VenueUpdateRequest,
)
from app.services.event_service import EventService, get_event_service
from db.session import get_db

router = APIRouter(prefix="/events", tags=["events"])


@router.get("", response_model=list[EventOverviewResponse])
def list_events(
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> list[EventOverviewResponse]:
    """
    List events with their attendee counts, newest first.
    """

    return [
        EventOverviewResponse(
            event=EventResponse.model_validate(overview.event),
            attendee_count=overview.attendee_count,
        )
        for overview in event_service.list_events(db=db)
    ]


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
def create_event(
    body: EventSetupRequest | None = None,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> EventResponse:
    """
    Create an event from the setup form, or a default draft when no body is sent.
    """

    try:
        if body is None:
            event = event_service.create_default_event(db=db)
        else:
            event = event_service.create_event(
                db=db,
                event_input=EventSetupInput.from_mapping(body.model_dump()),
            )
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return EventResponse.model_validate(event)


@router.post("/validate", response_model=ValidationResultResponse)
def validate_event(
    body: EventSetupRequest,
    event_service: EventService = Depends(get_event_service),
) -> ValidationResultResponse:
    """
    Run the event setup rules without saving anything.
    """

    result = event_service.validate_event(EventSetupInput.from_mapping(body.model_dump()))
    return ValidationResultResponse(
        is_valid=result.is_valid,
        errors=[
            ValidationErrorResponse(field=error.field, message=error.message)
            for error in result.errors
        ],
    )


@router.get("/{event_id}", response_model=EventResponse)
def get_event(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> EventResponse:
    try:
        event = event_service.get_event(db=db, event_id=event_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return EventResponse.model_validate(event)


@router.put("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: uuid.UUID,
    body: EventSetupRequest,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> EventResponse:
    try:
        event = event_service.update_event(
            db=db,
            event_id=event_id,
            event_input=EventSetupInput.from_mapping(body.model_dump()),
        )
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return EventResponse.model_validate(event)


@router.patch("/{event_id}/venue", response_model=EventResponse)
def update_venue(
    event_id: uuid.UUID,
    body: VenueUpdateRequest,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> EventResponse:
    """
    Update only the venue fields present in the request body.
    """

    venue_input = VenueInput.from_mapping(body.model_dump(exclude_unset=True))
    if not venue_input.present_fields():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="At least one venue field is required.",
        )
    try:
        event = event_service.update_venue(db=db, event_id=event_id, venue_input=venue_input)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return EventResponse.model_validate(event)


@router.post("/{event_id}/publish", response_model=AppLinksResponse)
def publish_event(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> AppLinksResponse:
    """
    Publish the attendee app and return its URL and QR code image link.
    """

    try:
        links = event_service.publish_event(db=db, event_id=event_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return AppLinksResponse(app_url=links.app_url, qr_code_url=links.qr_code_url)


@router.get("/{event_id}/links", response_model=AppLinksResponse)
def get_app_links(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> AppLinksResponse:
    try:
        links = event_service.app_links(db=db, event_id=event_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return AppLinksResponse(app_url=links.app_url, qr_code_url=links.qr_code_url)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    event_service: EventService = Depends(get_event_service),
) -> Response:
    try:
        event_service.delete_event(db=db, event_id=event_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
