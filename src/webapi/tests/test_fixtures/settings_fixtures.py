"""Settings helpers shared by conftest and tests that build their own settings."""

from pathlib import Path

from webapi.config.settings import Settings


def sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path}"


def make_settings(**overrides) -> Settings:
    """Settings isolated from any local .env file; schema-less for SQLite."""
    values = {
        "ENV": "testing",
        "DATABASE_URI": "sqlite+aiosqlite:///:memory:",
        "DB_SCHEMA": None,
        "LOG_FORMAT": "text",
        "LOG_LEVEL": "INFO",
        "LOG_TO_STDOUT": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
