"""
app/api/routers/sessions.py

Event schedule endpoints.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.errors import ServiceError, to_http_exception
from app.domain.event_inputs import SessionInput
from app.schemas.events import (
    SessionCreateRequest,
    SessionResponse,
    ValidationErrorResponse,
    ValidationResultResponse,
)
from app.services.session_service import SessionService, get_session_service
from db.session import get_db

router = APIRouter(prefix="/events/{event_id}/sessions", tags=["sessions"])


@router.get("", response_model=list[SessionResponse])
def list_sessions(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """
    Return the schedule ordered by date and start time.
    """

    try:
        records = session_service.list_sessions(db=db, event_id=event_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return [SessionResponse.model_validate(record) for record in records]


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
def add_session(
    event_id: uuid.UUID,
    body: SessionCreateRequest,
    db: Session = Depends(get_db),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    try:
        record = session_service.add_session(
            db=db,
            event_id=event_id,
            session_input=SessionInput.from_mapping(body.model_dump()),
        )
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return SessionResponse.model_validate(record)


@router.post("/validate", response_model=ValidationResultResponse)
def validate_session(
    event_id: uuid.UUID,
    body: SessionCreateRequest,
    db: Session = Depends(get_db),
    session_service: SessionService = Depends(get_session_service),
) -> ValidationResultResponse:
    """
    Check a session against the schedule rules and the event's dates without saving it.
    """

    try:
        result = session_service.validate_session(
            db=db,
            event_id=event_id,
            session_input=SessionInput.from_mapping(body.model_dump()),
        )
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return ValidationResultResponse(
        is_valid=result.is_valid,
        errors=[
            ValidationErrorResponse(field=error.field, message=error.message)
            for error in result.errors
        ],
    )


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_session(
    event_id: uuid.UUID,
    session_id: uuid.UUID,
    db: Session = Depends(get_db),
    session_service: SessionService = Depends(get_session_service),
) -> Response:
    try:
        session_service.remove_session(db=db, event_id=event_id, session_id=session_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
