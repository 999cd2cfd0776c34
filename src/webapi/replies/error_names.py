"""
Error Name Table: numeric error code -> display name.

Loaded once when the Connection Provider starts, from every row of the `error`
table, then never written again. It is shared by reference between the provider
and the Reply Mapper; no locking is needed because nothing mutates it.

A failed load leaves the table empty instead of blocking startup: names are
cosmetic, the numeric code is what clients act on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from webapi.errors.base import RepositoryError

if TYPE_CHECKING:
    from webapi.collections.base import RecordCollection
    from webapi.entities import ErrorDefinition

logger = logging.getLogger(__name__)


class ErrorNameTable(Mapping[int, str]):
    def __init__(self, names: Mapping[int, str] | None = None) -> None:
        self._names = MappingProxyType({int(code): name for code, name in (names or {}).items()})

    @classmethod
    async def load(cls, errors: RecordCollection[ErrorDefinition]) -> ErrorNameTable:
        try:
            rows = await errors.get()
        except RepositoryError:
            logger.warning("provider.error_names.load_failed", extra={"table": errors.name})
            return cls()

        table = cls({row.id: row.name for row in rows if row.id is not None})
        logger.info("provider.error_names.loaded", extra={"count": len(table)})
        return table

    def name_for(self, code: int) -> str | None:
        return self._names.get(int(code))

    def __getitem__(self, code: int) -> str:
        return self._names[int(code)]

    def __iter__(self) -> Iterator[int]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ErrorNameTable({dict(self._names)!r})"
