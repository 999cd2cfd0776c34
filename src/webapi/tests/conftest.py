"""
Core pytest configuration for the whole suite.

Every database test gets its own SQLite file under tmp_path (via aiosqlite),
with the tables created from `Base.metadata` and the `error` table seeded the
way a real deployment seeds it. Nothing is shared between tests, so tests may
commit freely.

Domain fixtures (collections, data context, sample records) live in
tests/test_fixtures/ and are re-exported at the bottom of this module.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncGenerator

# Silence chatty libraries before anything imports them
NOISY_LOGGERS = (
    "sqlalchemy",
    "sqlalchemy.engine",
    "sqlalchemy.engine.Engine",
    "aiosqlite",
    "asyncio",
    "httpx",
)
for _name in NOISY_LOGGERS:
    logging.getLogger(_name).setLevel(logging.WARNING)

import pytest
from sqlalchemy import insert
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from webapi.core.logging.builder import setup_logging
from webapi.database.base import Base
from webapi.models import Error  # importing the package registers every table
from .test_fixtures.settings_fixtures import make_settings, sqlite_url

# (id, error_name) rows every deployment carries
SEEDED_ERRORS = [
    {"id": 0, "error_name": "Ok"},
    {"id": 1, "error_name": "DatabaseError"},
    {"id": 2, "error_name": "NotFoundError"},
]


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    """
    Install the application logging config once, as the service does at startup.
    Tests that assert on log output use caplog, which attaches per test phase.
    """
    setup_logging(make_settings())
    yield


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "webapi.db"


@pytest.fixture
async def engine(db_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine over a fresh SQLite file with the schema created and errors seeded.

    A queue pool is forced so `engine.pool.checkedout()` can be asserted on.
    """
    engine = create_async_engine(
        sqlite_url(db_path),
        poolclass=AsyncAdaptedQueuePool,
        pool_pre_ping=True,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(insert(Error.__table__), SEEDED_ERRORS)

    yield engine

    await engine.dispose()


@pytest.fixture
async def bare_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """Engine over an empty database: no tables at all."""
    engine = create_async_engine(sqlite_url(tmp_path / "empty.db"), poolclass=AsyncAdaptedQueuePool)
    yield engine
    await engine.dispose()


# Collection / context fixtures
from .test_fixtures.collection_fixtures import (  # noqa: E402
    provider,
    context,
    cars,
    users,
    subscriptions,
    errors,
    add_cars,
    table_rows,
)

# HTTP fixtures
from .test_fixtures.api_fixtures import app, client  # noqa: E402
