"""
Batch Expression Builder: multi-row `IN (...)` statements keyed by integer ids.

`select_in` / `delete_in` bind the id list as one expanding parameter, so the
driver receives the values separately from the SQL text:

    DELETE FROM car WHERE car.id IN (__[POSTCOMPILE_id_1])

`format_id_list` renders the comma-joined literal form (`"10,11,12"`). It does
no escaping beyond integer formatting, which is only sound because every value
is checked to be an int first. It is used for log lines and must not be pointed
at string-valued identifiers.
"""

from collections.abc import Sequence

from sqlalchemy import Delete, Select, Table, delete, select


def checked_ids(ids: Sequence[int]) -> list[int]:
    """
    Validate an id batch: non-empty, integers only (bool rejected), order kept.
    """
    if isinstance(ids, (str, bytes)):
        raise ValueError("ids must be a sequence of integers, not a string")
    values = list(ids)
    if not values:
        raise ValueError("ids must not be empty")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"id {value!r} is not an integer")
    return values


def format_id_list(ids: Sequence[int]) -> str:
    return ",".join(str(int(value)) for value in checked_ids(ids))


def select_in(table: Table, ids: Sequence[int]) -> Select:
    return select(table).where(table.c.id.in_(checked_ids(ids)))


def delete_in(table: Table, ids: Sequence[int]) -> Delete:
    return delete(table).where(table.c.id.in_(checked_ids(ids)))
