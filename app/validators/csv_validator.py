"""
app/validators/csv_validator.py

Structural and row-level validation for attendee CSV imports.

Lines are split on raw newlines and cells on raw commas; quoted cells that
contain commas or newlines are not supported.
"""

from __future__ import annotations

from app.domain.event_inputs import AttendeeInput
from app.domain.validation import ValidationError, ValidationResult
from app.validators.attendee_validator import AttendeeValidator
from app.validators.field_validators import is_valid_email

CSV_FIELD = "csv"

REQUIRED_HEADERS: tuple[str, ...] = ("email", "first_name", "last_name")

ATTENDEE_COLUMNS: tuple[str, ...] = (
    "email",
    "first_name",
    "last_name",
    "company",
    "job_title",
    "phone",
)

ATTENDEE_CSV_TEMPLATE = (
    "email,first_name,last_name,company,job_title,phone\n"
    "example@email.com,John,Doe,Acme Corp,Developer,+1234567890"
)

DEFAULT_MAX_ERRORS = 10
SUPPRESSED_ERRORS_MESSAGE = "And more validation errors... Please fix the above issues first."
MIN_NAME_LENGTH = 2


def split_lines(csv_text: str) -> list[str]:
    return csv_text.strip().split("\n")


def parse_header(line: str) -> list[str]:
    return [header.strip() for header in line.lower().split(",")]


def parse_cells(line: str) -> list[str]:
    return [cell.strip().replace('"', "") for cell in line.split(",")]


class AttendeeCSVValidator:
    """
    Validates a raw attendee CSV blob before any row is imported.
    """

    def __init__(self, *, max_errors: int = DEFAULT_MAX_ERRORS) -> None:
        self._max_errors = max(1, max_errors)

    def validate(self, csv_text: str) -> ValidationResult:
        errors: list[ValidationError] = []

        if not csv_text.strip():
            errors.append(ValidationError(field=CSV_FIELD, message="CSV data is required"))
            return ValidationResult.from_errors(errors)

        lines = split_lines(csv_text)
        if len(lines) < 2:
            errors.append(
                ValidationError(
                    field=CSV_FIELD,
                    message="CSV must contain at least a header row and one data row",
                )
            )
            return ValidationResult.from_errors(errors)

        headers = parse_header(lines[0])
        missing = [header for header in REQUIRED_HEADERS if header not in headers]
        if missing:
            errors.append(
                ValidationError(
                    field=CSV_FIELD,
                    message=f"Missing required columns: {', '.join(missing)}",
                )
            )

        # Row checks still run for whichever required columns were found.
        email_index = self._index_of(headers, "email")
        first_name_index = self._index_of(headers, "first_name")
        last_name_index = self._index_of(headers, "last_name")

        for row_number, line in enumerate(lines[1:], start=2):
            values = parse_cells(line)

            email = self._cell(values, email_index)
            if email_index is not None and email and not is_valid_email(email):
                errors.append(
                    ValidationError(field=CSV_FIELD, message=f"Row {row_number}: Invalid email format")
                )

            if first_name_index is not None and not self._is_valid_name(
                self._cell(values, first_name_index)
            ):
                errors.append(
                    ValidationError(
                        field=CSV_FIELD,
                        message=(
                            f"Row {row_number}: First name is required and must be at least "
                            f"{MIN_NAME_LENGTH} characters"
                        ),
                    )
                )

            if last_name_index is not None and not self._is_valid_name(
                self._cell(values, last_name_index)
            ):
                errors.append(
                    ValidationError(
                        field=CSV_FIELD,
                        message=(
                            f"Row {row_number}: Last name is required and must be at least "
                            f"{MIN_NAME_LENGTH} characters"
                        ),
                    )
                )

        return self._capped(errors)

    def validate_records(
        self,
        records: list[AttendeeInput],
        row_validator: AttendeeValidator,
    ) -> ValidationResult:
        """
        Apply the full attendee rules to rows from ``parse_rows``.

        Messages carry the same 1-based row numbers as ``validate`` (the header
        is row 1) and the same error cap.
        """

        errors: list[ValidationError] = []
        for row_number, record in enumerate(records, start=2):
            for error in row_validator.validate(record).errors:
                errors.append(
                    ValidationError(field=CSV_FIELD, message=f"Row {row_number}: {error.message}")
                )
        return self._capped(errors)

    def _capped(self, errors: list[ValidationError]) -> ValidationResult:
        if len(errors) > self._max_errors:
            del errors[self._max_errors:]
            errors.append(ValidationError(field=CSV_FIELD, message=SUPPRESSED_ERRORS_MESSAGE))
        return ValidationResult.from_errors(errors)

    def parse_rows(self, csv_text: str) -> list[AttendeeInput]:
        """
        Map each data line onto the header row as an attendee record.

        Only non-empty cells under known attendee columns are kept. Call after
        ``validate`` has accepted the same text.
        """

        lines = split_lines(csv_text)
        if len(lines) < 2:
            return []

        headers = parse_header(lines[0])
        records: list[AttendeeInput] = []
        for line in lines[1:]:
            values = parse_cells(line)
            row: dict[str, str] = {}
            for index, header in enumerate(headers):
                if header not in ATTENDEE_COLUMNS:
                    continue
                value = self._cell(values, index)
                if value:
                    row[header] = value
            records.append(AttendeeInput.from_mapping(row))
        return records

    @staticmethod
    def _index_of(headers: list[str], name: str) -> int | None:
        try:
            return headers.index(name)
        except ValueError:
            return None

    @staticmethod
    def _cell(values: list[str], index: int | None) -> str:
        if index is None or index >= len(values):
            return ""
        return values[index]

    @staticmethod
    def _is_valid_name(value: str) -> bool:
        return bool(value) and len(value) >= MIN_NAME_LENGTH
