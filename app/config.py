"""
app/config.py

Application-level configuration helpers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from db.config import load_env_files


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading app settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    """
    Read a boolean from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    """
    Read an integer from environment variables with safe fallback.
    """

    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    """
    Read a string from environment variables with fallback.
    """

    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


@dataclass(frozen=True)
class ValidationSettings:
    """
    Runtime settings for form and CSV validation.
    """

    csv_max_validation_errors: int = 10
    log_validation_errors: bool = True


@dataclass(frozen=True)
class AppLinkSettings:
    """
    Public URLs used when an event app is published.
    """

    public_base_url: str = "https://app.evonto.com"
    qr_code_service_url: str = "https://api.qrserver.com/v1/create-qr-code/"
    qr_code_size: int = 200


@lru_cache(maxsize=1)
def get_validation_settings() -> ValidationSettings:
    """
    Return cached validation settings from environment variables.
    """

    return ValidationSettings(
        csv_max_validation_errors=max(1, _get_int_env("CSV_IMPORT_MAX_VALIDATION_ERRORS", 10)),
        log_validation_errors=_get_bool_env("VALIDATION_LOG_ERRORS", True),
    )


@lru_cache(maxsize=1)
def get_app_link_settings() -> AppLinkSettings:
    """
    Return cached app link settings from environment variables.
    """

    return AppLinkSettings(
        public_base_url=_get_str_env("APP_PUBLIC_BASE_URL", "https://app.evonto.com").rstrip("/"),
        qr_code_service_url=_get_str_env(
            "QR_CODE_SERVICE_URL",
            "https://api.qrserver.com/v1/create-qr-code/",
        ),
        qr_code_size=max(50, _get_int_env("QR_CODE_SIZE", 200)),
    )
