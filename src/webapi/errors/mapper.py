import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from .integrity_classifier import classify_integrity_error
from .base import DatabaseError

logger = logging.getLogger(__name__)


def describe_db_error(exc: BaseException) -> dict:
    """
    Structured, value-free description of a database failure for the log line.
    Never includes bound parameters (they may carry passwords).
    """
    details: dict = {"error_type": type(exc).__name__}
    if isinstance(exc, IntegrityError):
        kind, constraint_name = classify_integrity_error(exc)
        details["constraint_kind"] = kind.value
        details["constraint"] = constraint_name
    orig = getattr(exc, "orig", None)
    if orig is not None:
        details["driver_error"] = type(orig).__name__
    return details


@asynccontextmanager
async def db_error_handler(table: str, operation: str) -> AsyncIterator[None]:
    """
    Usage:
        async with db_error_handler("car", "add"):
            ... statements against the pool ...

    Converts any driver/SQLAlchemy failure (and socket-level OSError from a lost
    connection) into DatabaseError after logging the technical cause. Rollback
    is not done here; the TransactionScope inside has already rolled back by the
    time an exception reaches this handler.

    asyncio.CancelledError is a BaseException and passes through untouched.
    """
    try:
        yield
    except (SQLAlchemyError, OSError) as exc:
        extra = {"table": table, "operation": operation, **describe_db_error(exc)}
        constraint = extra.get("constraint")
        # The raw message stays at DEBUG: drivers echo parameter values into it
        logger.error("collection.%s.db_error", operation, extra=extra)
        logger.debug("collection.%s.db_error_raw", operation, extra={"table": table, "raw": str(exc)})
        raise DatabaseError(f"Failed to {operation} {table}", constraint=constraint) from exc
