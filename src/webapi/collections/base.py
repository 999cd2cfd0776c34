"""
Transactional Record Collection.

One generic class serves every entity table; the TableDescriptor supplies the
table and the record <-> column mapping. The collection holds nothing but the
engine, so a single instance is safely shared by concurrent requests; each call
checks its own connection out of the pool.

Batch semantics (add/modify/remove):
  - the whole batch runs in one transaction (TransactionScope)
  - statements are issued in input order
  - the batch commits only if every statement succeeded and, for modify/remove,
    the affected-row count equals the number of requested items
  - anything else rolls back and is reported as a failed Outcome; there is no
    partial success and no retry

Database failures never escape add/modify/remove as exceptions. `get` returns
rows, so it raises DatabaseError instead.
"""

import logging
import time
from collections.abc import Iterable, Sequence
from typing import Generic

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine

from webapi.database.transaction import TransactionScope
from webapi.errors.base import RepositoryError
from webapi.errors.codes import ErrorCode
from webapi.errors.mapper import db_error_handler
from webapi.replies.outcome import Outcome
from .descriptors import RecordT, TableDescriptor
from .expressions import delete_in, format_id_list, select_in

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


class RecordCollection(Generic[RecordT]):
    """
    get/add/modify/remove against one entity table.

    Type Parameters:
        RecordT: the entity record type the descriptor maps rows to.
    """

    def __init__(self, descriptor: TableDescriptor[RecordT], engine: AsyncEngine):
        self.descriptor = descriptor
        self.engine = engine

    @property
    def name(self) -> str:
        return self.descriptor.name

    # =================================================================================================================
    # Read
    # =================================================================================================================

    async def get(self, ids: Iterable[int] | None = None) -> list[RecordT]:
        """
        Fetch rows.

        Args:
            ids: None for every row; otherwise the rows whose id is in `ids`.
                 Duplicates collapse, unknown ids are simply not in the result.

        Returns:
            Records in the table's natural order (not stable across calls).

        Raises:
            DatabaseError: the table could not be read.
        """
        if ids is None:
            statement = select(self.descriptor.table)
        else:
            wanted = list(dict.fromkeys(ids))
            if not wanted:
                return []
            statement = select_in(self.descriptor.table, wanted)

        async with db_error_handler(self.name, "get"):
            async with self.engine.connect() as connection:
                result = await connection.execute(statement)
                rows = result.mappings().all()

        logger.debug("collection.get.success", extra={"table": self.name, "count": len(rows)})
        return [self.descriptor.to_record(row) for row in rows]

    # =================================================================================================================
    # Batch writes
    # =================================================================================================================

    async def add(self, items: Sequence[RecordT]) -> Outcome:
        """
        Insert every item in one transaction.

        Returns:
            Outcome.success(ids) with the generated ids in input order, or
            Outcome.failure(DATABASE_ERROR) with nothing inserted.
        """
        if not items:
            return Outcome.success([])

        start = time.perf_counter()
        table = self.descriptor.table
        ids: list[int] = []
        # MySQL has no INSERT .. RETURNING; the driver reports the generated key instead
        returning = self.engine.dialect.insert_returning
        try:
            async with db_error_handler(self.name, "add"):
                async with TransactionScope(self.engine) as tx:
                    for item in items:
                        statement = insert(table).values(**self.descriptor.to_values(item))
                        if returning:
                            result = await tx.execute(statement.returning(self.descriptor.key))
                            ids.append(result.scalar_one())
                        else:
                            result = await tx.execute(statement)
                            ids.append(result.inserted_primary_key[0])
                    await tx.commit()
        except RepositoryError as exc:
            return Outcome.failure(exc.error_code)

        logger.info(
            "collection.add.success",
            extra={"table": self.name, "count": len(ids), "duration_ms": _elapsed_ms(start)},
        )
        return Outcome.success(ids)

    async def modify(self, items: Sequence[RecordT]) -> Outcome:
        """
        Update every item (keyed by id) in one transaction.

        The batch commits only if the updates together touched exactly
        len(items) rows, i.e. every id existed. An unknown or missing id makes
        the counts diverge and the whole batch is rolled back with
        NOT_FOUND_ERROR. A failing statement stops the batch at once with
        DATABASE_ERROR.
        """
        if not items:
            return Outcome.success()

        start = time.perf_counter()
        table = self.descriptor.table
        try:
            async with db_error_handler(self.name, "modify"):
                async with TransactionScope(self.engine) as tx:
                    affected = 0
                    for item in items:
                        if item.id is None:
                            # Nothing to key the update on; counts as zero rows
                            continue
                        statement = (
                            update(table)
                            .where(self.descriptor.key == item.id)
                            .values(**self.descriptor.to_values(item))
                        )
                        result = await tx.execute(statement)
                        affected += result.rowcount

                    if affected != len(items):
                        await tx.rollback()
                        logger.info(
                            "collection.modify.not_found",
                            extra={"table": self.name, "requested": len(items), "affected": affected},
                        )
                        return Outcome.failure(ErrorCode.NOT_FOUND_ERROR)

                    await tx.commit()
        except RepositoryError as exc:
            return Outcome.failure(exc.error_code)

        logger.info(
            "collection.modify.success",
            extra={"table": self.name, "count": len(items), "duration_ms": _elapsed_ms(start)},
        )
        return Outcome.success()

    async def remove(self, ids: Sequence[int]) -> Outcome:
        """
        Delete the rows with the given ids in one multi-row statement.

        Commits only when the statement deleted exactly len(ids) rows. Duplicate
        ids therefore report NOT_FOUND_ERROR even if every distinct id exists;
        callers deduplicate first.
        """
        ids = list(ids)
        if not ids:
            return Outcome.success()

        start = time.perf_counter()
        statement = delete_in(self.descriptor.table, ids)
        try:
            async with db_error_handler(self.name, "remove"):
                async with TransactionScope(self.engine) as tx:
                    result = await tx.execute(statement)
                    deleted = result.rowcount

                    if deleted != len(ids):
                        await tx.rollback()
                        logger.info(
                            "collection.remove.not_found",
                            extra={
                                "table": self.name,
                                "ids": format_id_list(ids),
                                "requested": len(ids),
                                "affected": deleted,
                            },
                        )
                        return Outcome.failure(ErrorCode.NOT_FOUND_ERROR)

                    await tx.commit()
        except RepositoryError as exc:
            return Outcome.failure(exc.error_code)

        logger.info(
            "collection.remove.success",
            extra={"table": self.name, "ids": format_id_list(ids), "duration_ms": _elapsed_ms(start)},
        )
        return Outcome.success()
