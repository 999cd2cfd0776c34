"""
Scoped transaction over one pooled connection.

    async with TransactionScope(engine) as tx:
        result = await tx.execute(stmt)
        ...
        await tx.commit()

Leaving the block without a successful `commit()` rolls the transaction back,
including exits through an exception or task cancellation. The connection
goes back to the pool on every path.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

from sqlalchemy.engine import Result
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncTransaction
from sqlalchemy.sql import Executable

logger = logging.getLogger(__name__)


class TransactionScope:
    def __init__(self, engine: AsyncEngine) -> None:
        self._engine = engine
        self._connection: AsyncConnection | None = None
        self._transaction: AsyncTransaction | None = None
        self._committed = False

    @property
    def active(self) -> bool:
        return self._transaction is not None and self._transaction.is_active

    async def __aenter__(self) -> TransactionScope:
        self._connection = await self._engine.connect()
        try:
            self._transaction = await self._connection.begin()
        except BaseException:
            await self._connection.close()
            self._connection = None
            raise
        return self

    async def execute(self, statement: Executable, parameters: Any = None) -> Result:
        if not self.active:
            raise RuntimeError("TransactionScope is not active")
        return await self._connection.execute(statement, parameters)

    async def commit(self) -> None:
        if not self.active:
            raise RuntimeError("TransactionScope is not active")
        await self._transaction.commit()
        self._committed = True

    async def rollback(self) -> None:
        if self.active:
            await self._transaction.rollback()

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._connection is None:
            return
        try:
            if not self._committed:
                try:
                    await self.rollback()
                except Exception:
                    # Rollback failing must not mask the original error; closing the
                    # connection below discards the transaction server-side.
                    logger.exception("transaction.rollback_failed")
        finally:
            await self._connection.close()
            self._connection = None
            self._transaction = None
