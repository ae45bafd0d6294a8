"""
app/api/errors.py

Translation of service-layer exceptions into HTTP errors.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from app.services.errors import EntityNotFoundError, EntityValidationFailed, PersistenceError

ServiceError = (EntityValidationFailed, EntityNotFoundError, PersistenceError)


def to_http_exception(exc: Exception) -> HTTPException:
    if isinstance(exc, EntityValidationFailed):
        return HTTPException(
            status_code=422,
            detail=exc.to_dict(),
        )
    if isinstance(exc, EntityNotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Unable to persist changes.",
    )
