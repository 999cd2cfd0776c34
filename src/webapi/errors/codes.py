"""
Numeric error codes returned to clients.

The numeric value is the contract; the display name comes from the `error`
table (see webapi.replies.error_names). Every code a collection can return must
have a row there.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    OK = 0
    DATABASE_ERROR = 1
    NOT_FOUND_ERROR = 2
    # Boundary layer only: request body could not be turned into entity values
    INVALID_REQUEST = 3


# Transport status for each code (the reply body stays authoritative).
ERROR_CODE_TO_STATUS = {
    ErrorCode.OK: 200,
    ErrorCode.NOT_FOUND_ERROR: 404,
    ErrorCode.DATABASE_ERROR: 500,
    ErrorCode.INVALID_REQUEST: 422,
}


def http_status_for(code: ErrorCode | int) -> int:
    return ERROR_CODE_TO_STATUS.get(code, 400)


__all__ = ["ErrorCode", "ERROR_CODE_TO_STATUS", "http_status_for"]
