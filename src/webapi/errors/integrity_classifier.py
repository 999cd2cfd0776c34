"""
Classification of SQLAlchemy IntegrityErrors for diagnostics.

Every constraint violation inside a batch is reported to the client as
DATABASE_ERROR. The classification below only enriches the operator log line
(which constraint kind fired, on which constraint) so the failing batch can be
diagnosed without reading raw driver messages.
"""
import logging
from enum import Enum

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)


class ConstraintKind(str, Enum):
    UNIQUE = "unique"
    NOT_NULL = "not_null"
    FOREIGN_KEY = "foreign_key"
    CHECK = "check"
    UNKNOWN = "unknown"


# https://www.postgresql.org/docs/current/errcodes-appendix.html
class PostgresErrorCodes(str, Enum):
    UNIQUE_VIOLATION = "23505"
    NOT_NULL_VIOLATION = "23502"
    FOREIGN_KEY_VIOLATION = "23503"
    CHECK_VIOLATION = "23514"


PGCODE_KIND_MAP = {
    PostgresErrorCodes.UNIQUE_VIOLATION: ConstraintKind.UNIQUE,
    PostgresErrorCodes.NOT_NULL_VIOLATION: ConstraintKind.NOT_NULL,
    PostgresErrorCodes.FOREIGN_KEY_VIOLATION: ConstraintKind.FOREIGN_KEY,
    PostgresErrorCodes.CHECK_VIOLATION: ConstraintKind.CHECK,
}

_MESSAGE_KEYWORDS = (
    (ConstraintKind.UNIQUE, ("unique constraint", "unique failed", "unique violation", "duplicate")),
    (ConstraintKind.NOT_NULL, ("not null constraint", "not null", "null value in column")),
    (ConstraintKind.FOREIGN_KEY, ("foreign key constraint", "foreign key", "is not present in table")),
    (ConstraintKind.CHECK, ("check constraint", "check failed")),
)


def _sqlstate(orig) -> str | None:
    # psycopg exposes `pgcode`, asyncpg exposes `sqlstate`
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def _classify_from_postgres_diag(orig) -> tuple[ConstraintKind | None, str | None]:
    code = _sqlstate(orig)
    if not code:
        return None, None

    diag = getattr(orig, "diag", None)
    constraint_name = (
        getattr(diag, "constraint_name", None) if diag else getattr(orig, "constraint_name", None)
    )

    kind = PGCODE_KIND_MAP.get(code)
    if kind is None:
        logger.warning(
            "Unknown Postgres integrity error code encountered",
            extra={"sqlstate": code, "constraint_name": constraint_name},
        )
        return ConstraintKind.UNKNOWN, constraint_name

    return kind, constraint_name


def _classify_from_generic_message(msg: str) -> ConstraintKind:
    """
    Fallback for drivers without SQLSTATE (SQLite, MySQL).
    """
    normalized = msg.lower()
    for kind, keywords in _MESSAGE_KEYWORDS:
        if any(keyword in normalized for keyword in keywords):
            return kind
    return ConstraintKind.UNKNOWN


def classify_integrity_error(exc: IntegrityError) -> tuple[ConstraintKind, str | None]:
    """
    Heuristically classify an IntegrityError.

    Returns:
        A tuple of (ConstraintKind, constraint name if the driver reports it)
    """
    # SQLAlchemy's async adapters wrap the driver error once more
    orig = getattr(exc.orig, "__cause__", None) or exc.orig

    kind, constraint_name = _classify_from_postgres_diag(orig)
    if kind is not None:
        return kind, constraint_name

    return _classify_from_generic_message(str(exc.orig)), None
