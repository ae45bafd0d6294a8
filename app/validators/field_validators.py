"""
app/validators/field_validators.py

Stateless shape checks shared by the entity validators.

Each predicate expects a string; callers check presence first for optional fields.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_SEPARATORS = re.compile(r"[\s\-()]")
_PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{0,15}")
_COLOR_PATTERN = re.compile(r"#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})")
_TIME_PATTERN = re.compile(r"(?:[01]?[0-9]|2[0-3]):[0-5][0-9]")
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)

DATE_FORMATS: tuple[str, ...] = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
)


def is_valid_email(email: str) -> bool:
    return _EMAIL_PATTERN.fullmatch(email) is not None


def is_valid_phone(phone: str) -> bool:
    """
    Accept E.164-shaped numbers after removing spaces, hyphens, and parentheses.
    """

    digits = _PHONE_SEPARATORS.sub("", phone)
    return _PHONE_PATTERN.fullmatch(digits) is not None


def is_valid_url(url: str) -> bool:
    """
    Accept any absolute URL the WHATWG URL parser can build.
    """

    try:
        _URL_ADAPTER.validate_python(url)
    except PydanticValidationError:
        return False
    return True


def is_valid_color(color: str) -> bool:
    return _COLOR_PATTERN.fullmatch(color) is not None


def _parse_datetime(value: str) -> datetime | None:
    raw = value.strip()
    if not raw:
        return None

    normalized = raw[:-1] + "+00:00" if raw.endswith("Z") else raw
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt)
        except ValueError:
            continue
    return None


def parse_timestamp(value: str) -> datetime | None:
    """
    Parse a date or ISO date-time string into a naive timestamp.

    Plain dates become midnight. Values carrying an offset are converted to UTC
    so they can be compared with naive ones.
    """

    parsed = _parse_datetime(value)
    if parsed is not None and parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_calendar_date(value: str) -> date | None:
    """
    Parse a date or ISO date-time string into the calendar date it names.
    """

    parsed = _parse_datetime(value)
    return parsed.date() if parsed is not None else None


def is_valid_date(value: str) -> bool:
    if not value:
        return False
    return _parse_datetime(value) is not None


def is_valid_time(value: str) -> bool:
    """
    Accept ``H:MM`` or ``HH:MM`` on a 24-hour clock.
    """

    return _TIME_PATTERN.fullmatch(value) is not None


def time_to_minutes(value: str) -> int:
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)
