"""
Request-line logging middleware.
"""

from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request

logger = logging.getLogger("api.access")


def register_middleware(app: FastAPI) -> None:
    """Attach app-level middleware."""

    @app.middleware("http")
    async def request_logger(request: Request, call_next):
        start = time.perf_counter()
        # Unhandled faults surface as 500.
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info(
                "%s %s %d %.3f ms",
                request.method,
                request.url.path,
                status_code,
                elapsed_ms,
            )
