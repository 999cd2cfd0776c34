"""
Exceptions raised at the collection boundary.

Batch operations (add/modify/remove) never let these escape: they are turned
into an Outcome carrying `error_code`. Only `get`, which returns rows rather
than an Outcome, raises them to its caller; the HTTP layer answers with a
Reply built from `error_code`.
"""

from .codes import ErrorCode, http_status_for


class RepositoryError(Exception):
    """
    Base exception for collection/database errors.

    - message: human-friendly message (safe to show to clients)
    - constraint: optional DB constraint name (for logs only)
    - error_code: numeric ErrorCode reported to clients
    """

    def __init__(self, message: str, *, constraint: str | None = None,
                 error_code: ErrorCode = ErrorCode.DATABASE_ERROR):
        super().__init__(message)
        self.message = message
        self.constraint = constraint
        self.error_code = error_code

    def __str__(self) -> str:
        parts = []
        if self.constraint:
            parts.append(f"constraint: {self.constraint}")
        parts.append(f"code: {int(self.error_code)}")
        return f"{self.message} ({'; '.join(parts)})"

    def http_status(self) -> int:
        return http_status_for(self.error_code)


class DatabaseError(RepositoryError):
    """Any lower-level failure: connection loss, constraint violation, bad statement, commit failure."""

    def __init__(self, message: str, *, constraint: str | None = None):
        super().__init__(message, constraint=constraint, error_code=ErrorCode.DATABASE_ERROR)


__all__ = [
    "RepositoryError",
    "DatabaseError",
]
