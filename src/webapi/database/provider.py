"""
Connection Provider.

Owns the AsyncEngine (and with it the connection pool) plus the Error Name
Table loaded at startup. Built once per process:

    provider = await DataProvider.connect(settings)
    ...
    await provider.dispose()

The engine is configured with `pool_pre_ping` so connections dropped by the
server while idle are replaced transparently instead of failing the next
statement. Tables are addressed without a schema in the models; the configured
DB_SCHEMA is applied through `schema_translate_map`.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from webapi.config.settings import Settings
from webapi.replies.error_names import ErrorNameTable

logger = logging.getLogger(__name__)


def engine_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for create_async_engine derived from settings."""
    options: dict[str, Any] = {
        "echo": settings.SQLALCHEMY_ECHO,
        "pool_pre_ping": True,
    }
    # SQLite uses a pool class without size limits
    if make_url(settings.DATABASE_URL).get_backend_name() != "sqlite":
        options["pool_size"] = settings.DB_POOL_SIZE
        options["max_overflow"] = settings.DB_MAX_OVERFLOW
    if settings.DB_SCHEMA:
        options["execution_options"] = {"schema_translate_map": {None: settings.DB_SCHEMA}}
    return options


def create_engine(settings: Settings) -> AsyncEngine:
    return create_async_engine(settings.DATABASE_URL, **engine_options(settings))


class DataProvider:
    def __init__(self, engine: AsyncEngine, error_names: ErrorNameTable) -> None:
        self.engine = engine
        self.error_names = error_names

    @classmethod
    async def connect(cls, settings: Settings) -> DataProvider:
        engine = create_engine(settings)
        url = make_url(settings.DATABASE_URL)
        logger.info(
            "provider.connect",
            extra={"backend": url.get_backend_name(), "host": url.host, "database": url.database},
        )
        return await cls.from_engine(engine)

    @classmethod
    async def from_engine(cls, engine: AsyncEngine) -> DataProvider:
        """Wrap an existing engine and load the Error Name Table through it."""
        # Imported here: the collections package depends on this module
        from webapi.collections.base import RecordCollection
        from webapi.collections.descriptors import ERRORS

        error_names = await ErrorNameTable.load(RecordCollection(ERRORS, engine))
        return cls(engine, error_names)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("provider.disposed")
