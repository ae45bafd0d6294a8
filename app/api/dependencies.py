"""
app/api/dependencies.py

Upload guards for the attendee CSV endpoints.
"""

from __future__ import annotations

from pathlib import PurePath

from fastapi import File, HTTPException, UploadFile, status

# Browsers and spreadsheet exports label CSV files inconsistently.
CSV_MEDIA_TYPES = frozenset(
    {
        "text/csv",
        "application/csv",
        "application/vnd.ms-excel",
        "text/plain",
    }
)


def looks_like_csv(filename: str | None, content_type: str | None) -> bool:
    suffix = PurePath((filename or "").strip()).suffix.lower()
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return suffix == ".csv" or media_type in CSV_MEDIA_TYPES


def get_csv_upload(file: UploadFile = File(...)) -> UploadFile:
    if not looks_like_csv(file.filename, file.content_type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Attendee imports must be CSV files.",
        )
    return file


def read_csv_text(file: UploadFile) -> str:
    """
    Decode an uploaded CSV as UTF-8 text; a leading BOM is dropped.
    """

    try:
        return file.file.read().decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="CSV must be UTF-8 encoded.",
        ) from exc
