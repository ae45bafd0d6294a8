"""
tests/test_event_validator.py

Event setup rules, run against a fixed clock so date checks are deterministic.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from app.domain.event_inputs import EventSetupInput
from app.validators.event_validator import EventSetupValidator

TODAY = date(2026, 10, 18)


@pytest.fixture()
def validator() -> EventSetupValidator:
    return EventSetupValidator(clock=lambda: TODAY)


def _valid_event(**overrides: str | None) -> EventSetupInput:
    values: dict[str, str | None] = {
        "name": "PyCon Berlin",
        "start_date": (TODAY + timedelta(days=30)).isoformat(),
        "end_date": (TODAY + timedelta(days=32)).isoformat(),
    }
    values.update(overrides)
    return EventSetupInput(**values)


def _messages(result, field: str) -> list[str]:
    return [error.message for error in result.errors if error.field == field]


class TestRequiredFields:
    def test_minimal_valid_event(self, validator: EventSetupValidator) -> None:
        result = validator.validate(_valid_event())
        assert result.is_valid
        assert result.errors == ()

    def test_empty_input_reports_each_required_field(self, validator: EventSetupValidator) -> None:
        result = validator.validate(EventSetupInput())

        assert not result.is_valid
        assert [error.field for error in result.errors] == ["name", "start_date", "end_date"]
        assert _messages(result, "name") == ["Event name is required"]
        assert _messages(result, "start_date") == ["Start date is required"]
        assert _messages(result, "end_date") == ["End date is required"]

    def test_whitespace_name_is_missing(self, validator: EventSetupValidator) -> None:
        result = validator.validate(_valid_event(name="   "))
        assert _messages(result, "name") == ["Event name is required"]

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("Go", "Event name must be at least 3 characters long"),
            ("x" * 101, "Event name must be less than 100 characters"),
        ],
    )
    def test_name_length_bounds(self, validator: EventSetupValidator, name: str, message: str) -> None:
        assert _messages(validator.validate(_valid_event(name=name)), "name") == [message]

    def test_name_at_bounds_is_accepted(self, validator: EventSetupValidator) -> None:
        assert validator.validate(_valid_event(name="abc")).is_valid
        assert validator.validate(_valid_event(name="x" * 100)).is_valid

    def test_unparseable_dates(self, validator: EventSetupValidator) -> None:
        result = validator.validate(_valid_event(start_date="soon", end_date="2026-13-01"))

        assert _messages(result, "start_date") == ["Please enter a valid start date"]
        assert _messages(result, "end_date") == ["Please enter a valid end date"]


class TestDateRange:
    def test_end_before_start_is_ordering_error_only(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            EventSetupInput(name="Go", start_date="2099-01-01", end_date="2098-12-31")
        )

        assert not result.is_valid
        assert _messages(result, "end_date") == ["End date must be after start date"]
        assert _messages(result, "name") == ["Event name must be at least 3 characters long"]
        assert not any("365" in error.message for error in result.errors)

    def test_duration_over_a_year(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            EventSetupInput(
                name="ValidConf",
                start_date=TODAY.isoformat(),
                end_date=(TODAY + timedelta(days=400)).isoformat(),
            )
        )

        assert _messages(result, "end_date") == ["Event duration cannot exceed 365 days"]

    def test_exactly_365_days_is_allowed(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            _valid_event(
                start_date=TODAY.isoformat(),
                end_date=(TODAY + timedelta(days=365)).isoformat(),
            )
        )
        assert result.is_valid

    def test_single_day_event(self, validator: EventSetupValidator) -> None:
        day = TODAY.isoformat()
        assert validator.validate(_valid_event(start_date=day, end_date=day)).is_valid

    def test_start_in_the_past_uses_injected_clock(self) -> None:
        event = _valid_event(start_date="2026-10-17", end_date="2026-10-20")

        assert _messages(
            EventSetupValidator(clock=lambda: TODAY).validate(event), "start_date"
        ) == ["Start date cannot be in the past"]
        assert EventSetupValidator(clock=lambda: date(2026, 10, 1)).validate(event).is_valid

    def test_times_of_day_are_compared(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            _valid_event(start_date="2099-01-01T10:00", end_date="2099-01-01T09:00")
        )
        assert _messages(result, "end_date") == ["End date must be after start date"]

        same_day = _valid_event(start_date="2099-01-01T09:00", end_date="2099-01-01T17:30")
        assert validator.validate(same_day).is_valid

    def test_offsets_are_compared_in_utc(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            _valid_event(start_date="2099-01-01T12:00:00+02:00", end_date="2099-01-01T10:30:00Z")
        )
        assert result.is_valid

    def test_partial_day_over_a_year_is_rejected(self, validator: EventSetupValidator) -> None:
        start = TODAY + timedelta(days=1)
        result = validator.validate(
            _valid_event(
                start_date=f"{start.isoformat()}T08:00",
                end_date=f"{(start + timedelta(days=365)).isoformat()}T09:00",
            )
        )
        assert _messages(result, "end_date") == ["Event duration cannot exceed 365 days"]

    def test_later_today_is_not_in_the_past(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            _valid_event(start_date=f"{TODAY.isoformat()}T00:00", end_date=f"{TODAY.isoformat()}T18:00")
        )
        assert result.is_valid

    def test_range_checks_skipped_when_a_date_is_invalid(self, validator: EventSetupValidator) -> None:
        result = validator.validate(_valid_event(start_date="2000-01-01", end_date="bad"))

        assert _messages(result, "start_date") == []
        assert _messages(result, "end_date") == ["Please enter a valid end date"]


class TestOptionalFields:
    def test_optional_shape_violations_in_order(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            _valid_event(
                description="d" * 501,
                organizer_email="not-an-email",
                organizer_phone="abc",
                organization_website="example.com",
                primary_color="blue",
                accent_color="#12",
                organization_name="o" * 101,
                organizer_name="n" * 101,
            )
        )

        assert [error.field for error in result.errors] == [
            "description",
            "organizer_email",
            "organizer_phone",
            "organization_website",
            "primary_color",
            "accent_color",
            "organization_name",
            "organizer_name",
        ]

    def test_valid_optional_fields(self, validator: EventSetupValidator) -> None:
        result = validator.validate(
            _valid_event(
                description="Three days of talks.",
                organizer_email="team@pycon.de",
                organizer_phone="+49 30 1234567",
                organization_website="https://pycon.de",
                primary_color="#6366F1",
                accent_color="#F59E0B",
                organization_name="Python Software Verband",
                organizer_name="Ada",
            )
        )
        assert result.is_valid

    def test_empty_optional_strings_are_skipped(self, validator: EventSetupValidator) -> None:
        result = validator.validate(_valid_event(organizer_email="", primary_color=""))
        assert result.is_valid


def test_repeated_validation_is_identical(validator: EventSetupValidator) -> None:
    event = _valid_event(name="Go", organizer_email="bad")
    assert validator.validate(event) == validator.validate(event)


def test_is_valid_matches_error_list(validator: EventSetupValidator) -> None:
    for event in (EventSetupInput(), _valid_event(), _valid_event(primary_color="red")):
        result = validator.validate(event)
        assert result.is_valid == (len(result.errors) == 0)
