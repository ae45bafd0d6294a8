"""
tests/test_session_validator.py

Session title, time slot, and event-range rules.
"""

from __future__ import annotations

import pytest

from app.domain.event_inputs import SessionInput
from app.validators.session_validator import SessionValidator

EVENT_START = "2026-11-02"
EVENT_END = "2026-11-04"


@pytest.fixture()
def validator() -> SessionValidator:
    return SessionValidator()


def _session(**overrides: str | None) -> SessionInput:
    values: dict[str, str | None] = {
        "title": "Keynote",
        "start_time": "09:00",
        "end_time": "10:00",
        "date": "2026-11-03",
    }
    values.update(overrides)
    return SessionInput(**values)


def _messages(result, field: str) -> list[str]:
    return [error.message for error in result.errors if error.field == field]


class TestRequiredFields:
    def test_valid_session(self, validator: SessionValidator) -> None:
        assert validator.validate(_session(), EVENT_START, EVENT_END).is_valid

    def test_empty_session(self, validator: SessionValidator) -> None:
        result = validator.validate(SessionInput())

        assert [error.field for error in result.errors] == ["title", "start_time", "end_time", "date"]
        assert _messages(result, "title") == ["Session title is required"]
        assert _messages(result, "date") == ["Session date is required"]

    @pytest.mark.parametrize(
        ("title", "message"),
        [
            ("AI", "Session title must be at least 3 characters long"),
            ("t" * 201, "Session title must be less than 200 characters"),
        ],
    )
    def test_title_bounds(self, validator: SessionValidator, title: str, message: str) -> None:
        assert _messages(validator.validate(_session(title=title)), "title") == [message]

    def test_malformed_times_and_date(self, validator: SessionValidator) -> None:
        result = validator.validate(_session(start_time="9am", end_time="25:00", date="someday"))

        assert _messages(result, "start_time") == ["Please enter a valid start time"]
        assert _messages(result, "end_time") == ["Please enter a valid end time"]
        assert _messages(result, "date") == ["Please enter a valid date"]


class TestTimeRange:
    def test_too_short(self, validator: SessionValidator) -> None:
        result = validator.validate(_session(end_time="09:10"), EVENT_START, EVENT_END)

        assert not result.is_valid
        assert _messages(result, "end_time") == ["Session must be at least 15 minutes long"]

    def test_end_before_start_suppresses_duration_checks(self, validator: SessionValidator) -> None:
        result = validator.validate(_session(end_time="08:00"), EVENT_START, EVENT_END)

        assert _messages(result, "end_time") == ["End time must be after start time"]

    def test_equal_times_rejected(self, validator: SessionValidator) -> None:
        result = validator.validate(_session(end_time="09:00"))
        assert _messages(result, "end_time") == ["End time must be after start time"]

    def test_longer_than_eight_hours(self, validator: SessionValidator) -> None:
        result = validator.validate(_session(start_time="8:00", end_time="16:01"))
        assert _messages(result, "end_time") == ["Session cannot be longer than 8 hours"]

    def test_duration_bounds_inclusive(self, validator: SessionValidator) -> None:
        assert validator.validate(_session(end_time="09:15")).is_valid
        assert validator.validate(_session(start_time="8:00", end_time="16:00")).is_valid


class TestEventRange:
    @pytest.mark.parametrize("day", ["2026-11-02", "2026-11-04"])
    def test_boundaries_inclusive(self, validator: SessionValidator, day: str) -> None:
        assert validator.validate(_session(date=day), EVENT_START, EVENT_END).is_valid

    @pytest.mark.parametrize("day", ["2026-11-01", "2026-11-05"])
    def test_outside_range(self, validator: SessionValidator, day: str) -> None:
        result = validator.validate(_session(date=day), EVENT_START, EVENT_END)
        assert _messages(result, "date") == ["Session date must be within the event date range"]

    def test_range_ignored_without_both_bounds(self, validator: SessionValidator) -> None:
        assert validator.validate(_session(date="2030-01-01"), EVENT_START, None).is_valid
        assert validator.validate(_session(date="2030-01-01")).is_valid


def test_optional_lengths(validator: SessionValidator) -> None:
    result = validator.validate(
        _session(description="d" * 501, speaker="s" * 101, venue="v" * 101)
    )

    assert [error.field for error in result.errors] == ["description", "speaker", "venue"]
    assert _messages(result, "speaker") == ["Speaker name must be less than 100 characters"]


def test_repeated_validation_is_identical(validator: SessionValidator) -> None:
    session = _session(end_time="09:05", date="2027-01-01")
    first = validator.validate(session, EVENT_START, EVENT_END)
    assert first == validator.validate(session, EVENT_START, EVENT_END)
    assert first.is_valid == (len(first.errors) == 0)
