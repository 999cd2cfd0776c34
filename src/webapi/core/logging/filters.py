"""
Logging filters.

RequestIdFilter stamps every LogRecord with the id of the HTTP request being
served, read from a contextvar so it follows the request across awaits and
never leaks into a concurrent request. Records logged outside a request get
the sentinel "-".

RedactFilter masks sensitive `extra` keys (passwords, tokens) before any
formatter sees them. User records carry a password column, so `usr_password`
is masked as well.
"""

import contextvars
import logging
from logging import LogRecord

_request_id_ctx: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id", default=None
)


def set_request_id(request_id: str | None) -> contextvars.Token:
    """Set the request id for the current context; pass the token to reset_request_id()."""
    return _request_id_ctx.set(request_id)


def reset_request_id(token: contextvars.Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> str | None:
    return _request_id_ctx.get()


class RequestIdFilter(logging.Filter):
    """
    Guarantees `record.request_id` exists.

    Precedence: an explicit `extra={"request_id": ...}`, then the contextvar,
    then "-". Never drops a record.
    """

    def filter(self, record: LogRecord) -> bool:
        record.request_id = (
            getattr(record, "request_id", None) or get_request_id() or "-"
        )
        return True


class RedactFilter(logging.Filter):
    SENSITIVE = {
        "password",
        "usr_password",
        "secret",
        "token",
        "access_token",
        "refresh_token",
        "authorization",
    }
    MASK = "***REDACTED***"

    def filter(self, record: LogRecord) -> bool:
        for key in list(record.__dict__.keys()):
            if key.lower() in self.SENSITIVE:
                record.__dict__[key] = self.MASK
        return True
