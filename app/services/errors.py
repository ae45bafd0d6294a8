"""
app/services/errors.py

Service-layer exceptions shared by the event, session, and attendee services.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.domain.validation import ValidationResult

logger = logging.getLogger(__name__)


class EntityValidationFailed(ValueError):
    """
    Raised when a candidate record fails validation; the store is not touched.
    """

    def __init__(self, *, entity: str, result: ValidationResult) -> None:
        super().__init__(f"{entity} validation failed with {len(result.errors)} error(s).")
        self.entity = entity
        self.result = result

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": str(self),
            "errors": [
                {"field": error.field, "message": error.message}
                for error in self.result.errors
            ],
        }


class EntityNotFoundError(LookupError):
    """
    Raised when a referenced event, session, or attendee does not exist.
    """

    def __init__(self, *, entity: str, entity_id: object) -> None:
        super().__init__(f"{entity} {entity_id} was not found.")
        self.entity = entity
        self.entity_id = entity_id


class PersistenceError(RuntimeError):
    """
    Raised when a validated change cannot be written to the store.
    """


@contextmanager
def unit_of_work(db: Session, *, action: str) -> Iterator[None]:
    """
    Commit the staged changes, rolling back and wrapping any database failure.

    A failed write leaves no compensating action behind.
    """

    try:
        yield
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Persistence failed action=%s: %s", action, exc)
        raise PersistenceError(f"Failed to {action}.") from exc


def log_rejection(entity: str, result: ValidationResult) -> None:
    for error in result.errors:
        logger.warning(
            "%s validation error field=%s message=%s",
            entity,
            error.field,
            error.message,
        )
