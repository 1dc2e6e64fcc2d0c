"""
API error types and their HTTP rendering.

Handlers raise these at the point of failure; `install_error_handlers` turns
them into responses:
- ApiError        -> {"error": "<message>"}
- PlainTextError  -> "<message>" as text/plain
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

logger = logging.getLogger(__name__)


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class PlainTextError(ApiError):
    pass


async def _api_error_handler(request: Request, exc: ApiError) -> Response:
    logger.debug("api_error %s %s -> %d %s", request.method, request.url.path, exc.status_code, exc.message)
    if isinstance(exc, PlainTextError):
        return PlainTextResponse(exc.message, status_code=exc.status_code)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
