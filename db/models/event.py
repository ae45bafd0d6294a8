"""
db/models/event.py

Event model: root entity for one configured conference.
Sessions and attendees are scoped to an event.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, Index, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from db.base import Base, TimestampMixin

if TYPE_CHECKING:
    from db.models.attendee import Attendee
    from db.models.event_session import EventSession


class EventStatus:
    DRAFT = "draft"
    CONFIGURED = "configured"
    PUBLISHED = "published"


class Event(Base, TimestampMixin):
    """
    Branding, schedule bounds, venue, and organizer details for one event.
    """

    __tablename__ = "events"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=EventStatus.DRAFT,
        comment="draft, configured, published",
    )

    primary_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    accent_color: Mapped[str | None] = mapped_column(String(7), nullable=True)

    venue_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    venue_address: Mapped[str | None] = mapped_column(String(500), nullable=True)
    venue_maps_link: Mapped[str | None] = mapped_column(Text, nullable=True)

    organizer_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    organizer_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    organizer_phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    organization_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    organization_website: Mapped[str | None] = mapped_column(Text, nullable=True)

    # ── Relationships ──────────────────────────────────────────────────────────

    sessions: Mapped[list["EventSession"]] = relationship(
        "EventSession",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    attendees: Mapped[list["Attendee"]] = relationship(
        "Attendee",
        back_populates="event",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    # ── Indexes ────────────────────────────────────────────────────────────────

    __table_args__ = (
        Index("ix_events_status", "status"),
        Index("ix_events_start_date", "start_date"),
    )

    def __repr__(self) -> str:
        return f"<Event id={self.id} name={self.name!r} status={self.status!r}>"
