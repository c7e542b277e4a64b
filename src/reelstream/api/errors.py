"""Translate validation errors into short plain-text HTTP responses.

Only errors raised before the response head is sent are handled here. A
``StreamAbortedError`` surfaces after headers are committed and is left to
the server, which logs it and drops the connection.
"""

from __future__ import annotations

from fastapi import FastAPI
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from reelstream.core.errors import (
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    ReelstreamError,
)

_BODIES = {
    403: "Forbidden",
    404: "File not found",
}


async def reelstream_error_handler(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, ReelstreamError)
    # Never echo resolved filesystem paths back to the client.
    body = _BODIES.get(exc.status_code) or str(exc)
    return PlainTextResponse(body, status_code=exc.status_code)


def install_error_handlers(app: FastAPI) -> None:
    for exc_class in (BadRequestError, ForbiddenError, NotFoundError):
        app.add_exception_handler(exc_class, reelstream_error_handler)
