"""
app/api/routers/attendees.py

Attendee roster endpoints, including CSV import.
"""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Response, UploadFile, status
from sqlalchemy.orm import Session

from app.api.dependencies import get_csv_upload, read_csv_text
from app.api.errors import ServiceError, to_http_exception
from app.domain.event_inputs import AttendeeInput
from app.schemas.events import (
    AttendeeCreateRequest,
    AttendeeImportResponse,
    AttendeeResponse,
    ValidationErrorResponse,
    ValidationResultResponse,
)
from app.services.attendee_service import AttendeeService, get_attendee_service
from app.validators.csv_validator import ATTENDEE_CSV_TEMPLATE
from db.session import get_db

router = APIRouter(prefix="/events/{event_id}/attendees", tags=["attendees"])


@router.get("", response_model=list[AttendeeResponse])
def list_attendees(
    event_id: uuid.UUID,
    db: Session = Depends(get_db),
    attendee_service: AttendeeService = Depends(get_attendee_service),
) -> list[AttendeeResponse]:
    try:
        records = attendee_service.list_attendees(db=db, event_id=event_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return [AttendeeResponse.model_validate(record) for record in records]


@router.post("", response_model=AttendeeResponse, status_code=status.HTTP_201_CREATED)
def add_attendee(
    event_id: uuid.UUID,
    body: AttendeeCreateRequest,
    db: Session = Depends(get_db),
    attendee_service: AttendeeService = Depends(get_attendee_service),
) -> AttendeeResponse:
    try:
        record = attendee_service.add_attendee(
            db=db,
            event_id=event_id,
            attendee_input=AttendeeInput.from_mapping(body.model_dump()),
        )
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return AttendeeResponse.model_validate(record)


@router.get("/template")
def download_template(event_id: uuid.UUID) -> Response:
    """
    Return the attendee CSV template with one example row.
    """

    return Response(
        content=ATTENDEE_CSV_TEMPLATE,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="attendee_template.csv"'},
    )


@router.post("/import/validate", response_model=ValidationResultResponse)
def validate_import(
    event_id: uuid.UUID,
    file: UploadFile = Depends(get_csv_upload),
    attendee_service: AttendeeService = Depends(get_attendee_service),
) -> ValidationResultResponse:
    """
    Check an attendee CSV without importing it.
    """

    try:
        result = attendee_service.validate_csv(read_csv_text(file))
    finally:
        file.file.close()
    return ValidationResultResponse(
        is_valid=result.is_valid,
        errors=[
            ValidationErrorResponse(field=error.field, message=error.message)
            for error in result.errors
        ],
    )


@router.post("/import", response_model=AttendeeImportResponse, status_code=status.HTTP_201_CREATED)
def import_attendees(
    event_id: uuid.UUID,
    file: UploadFile = Depends(get_csv_upload),
    db: Session = Depends(get_db),
    attendee_service: AttendeeService = Depends(get_attendee_service),
) -> AttendeeImportResponse:
    """
    Import every row of an attendee CSV, or none if any row is invalid.
    """

    try:
        summary = attendee_service.import_csv(
            db=db,
            event_id=event_id,
            csv_text=read_csv_text(file),
        )
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    finally:
        file.file.close()
    return AttendeeImportResponse(rows_imported=summary.rows_imported)


@router.delete("/{attendee_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_attendee(
    event_id: uuid.UUID,
    attendee_id: uuid.UUID,
    db: Session = Depends(get_db),
    attendee_service: AttendeeService = Depends(get_attendee_service),
) -> Response:
    try:
        attendee_service.remove_attendee(db=db, event_id=event_id, attendee_id=attendee_id)
    except ServiceError as exc:
        raise to_http_exception(exc) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
