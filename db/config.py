"""
db/config.py

Event store connection settings, resolved from the process environment and
the project's optional `.env` / `.env.local` files.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILENAMES: tuple[str, ...] = (".env", ".env.local")

# Deployments where CLOUD_DATABASE_URL wins over LOCAL_DATABASE_URL.
CLOUD_ENVIRONMENTS = frozenset({"prod", "production", "staging", "cloud"})

_DRIVER_PREFIXES: tuple[tuple[str, str], ...] = (
    ("postgres://", "postgresql+psycopg://"),
    ("postgresql://", "postgresql+psycopg://"),
)


def _parse_env_line(line: str) -> tuple[str, str] | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    key, sep, value = stripped.partition("=")
    if not sep or not key.strip():
        return None
    return key.strip(), value.strip().strip("\"'")


def load_env_files(root: Path = PROJECT_ROOT) -> None:
    """
    Copy KEY=VALUE pairs from the env files into ``os.environ``.

    Variables already set in the process win over file values.
    """

    for filename in ENV_FILENAMES:
        path = root / filename
        if not path.is_file():
            continue
        for line in path.read_text(encoding="utf-8").splitlines():
            pair = _parse_env_line(line)
            if pair is not None:
                os.environ.setdefault(*pair)


def normalize_postgres_url(url: str) -> str:
    """
    Point bare postgres URLs at the psycopg driver.
    """

    for prefix, replacement in _DRIVER_PREFIXES:
        if url.startswith(prefix):
            return replacement + url[len(prefix):]
    return url


def resolve_database_url() -> str:
    """
    Pick DATABASE_URL, then CLOUD_DATABASE_URL on cloud deployments, then
    LOCAL_DATABASE_URL.
    """

    load_env_files()
    environment = os.getenv("ENVIRONMENT", "local").strip().lower()

    candidates = ["DATABASE_URL"]
    if environment in CLOUD_ENVIRONMENTS:
        candidates.append("CLOUD_DATABASE_URL")
    candidates.append("LOCAL_DATABASE_URL")

    for name in candidates:
        url = os.getenv(name, "").strip()
        if url:
            return normalize_postgres_url(url)

    raise RuntimeError(
        "No database URL configured. Set DATABASE_URL, or configure "
        "LOCAL_DATABASE_URL / CLOUD_DATABASE_URL."
    )


@dataclass(frozen=True)
class DatabaseSettings:
    """
    Engine and pool settings for the event store.
    """

    url: str
    echo: bool = False
    pool_recycle: int = 1800
    pool_size: int = 5
    max_overflow: int = 10

    @classmethod
    def from_env(cls) -> DatabaseSettings:
        url = resolve_database_url()
        return cls(
            url=url,
            echo=os.getenv("SQL_ECHO", "").strip().lower() in {"1", "true", "yes", "on"},
            pool_recycle=_bounded_int("DB_POOL_RECYCLE", cls.pool_recycle, minimum=1),
            pool_size=_bounded_int("DB_POOL_SIZE", cls.pool_size, minimum=1),
            max_overflow=_bounded_int("DB_MAX_OVERFLOW", cls.max_overflow, minimum=0),
        )


def _bounded_int(name: str, default: int, *, minimum: int) -> int:
    raw = os.getenv(name, "").strip()
    try:
        value = int(raw) if raw else default
    except ValueError:
        value = default
    return max(minimum, value)


def get_database_settings() -> DatabaseSettings:
    """
    Resolve engine settings; raises RuntimeError when no URL is configured.
    """

    return DatabaseSettings.from_env()
