"""
Exception handlers that turn boundary failures into Reply bodies.

    RepositoryError        -> {"errorCode": 1, "errorName": "DatabaseError"}   (500)
    RequestValidationError -> {"errorCode": 3}                                 (422)

Only `get` lets a RepositoryError reach this layer; batch operations already
answer with an Outcome.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from webapi.errors.base import RepositoryError
from webapi.errors.codes import ErrorCode, http_status_for
from webapi.replies.mapper import dump_reply
from .dependencies import get_context

logger = logging.getLogger(__name__)


async def repository_error_handler(request: Request, exc: RepositoryError) -> JSONResponse:
    # DB internals were logged where the error was raised; keep this line short
    logger.warning(
        "http.repository_error",
        extra={"method": request.method, "path": request.url.path, "code": int(exc.error_code)},
    )
    reply = get_context(request).replies.error_reply(exc.error_code)
    return JSONResponse(status_code=exc.http_status(), content=dump_reply(reply))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "http.invalid_request",
        extra={"method": request.method, "path": request.url.path, "error_count": len(exc.errors())},
    )
    reply = get_context(request).replies.error_reply(ErrorCode.INVALID_REQUEST)
    return JSONResponse(status_code=http_status_for(ErrorCode.INVALID_REQUEST), content=dump_reply(reply))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryError, repository_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
