"""
Core middleware and exception handler registration for the FastAPI application.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable, Optional

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from freeeats.core.exceptions import BaseAppException
from freeeats.core.logging import get_logger, get_struct_logger, request_id as request_id_var

logger = get_logger(__name__)
access_logger = get_struct_logger("freeeats.access")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Adds a unique request ID to each incoming request.

    The ID is stored in request.state.request_id, in the logging context
    variable, and echoed back in the X-Request-ID response header.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Measures request processing time and emits one access log event per request.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        process_time = time.perf_counter() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        access_logger.info(
            "request_completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time=round(process_time, 4),
            client_host=request.client.host if request.client else None,
        )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register core middlewares. The last middleware added is the outermost,
    so the request ID is assigned before timing starts.
    """
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    """Render application exceptions as {"error": {...}} payloads."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.error_code.value} - {exc.message}",
        extra={
            "error_code": exc.error_code.value,
            "path": request.url.path,
            "method": request.method,
            "status_code": exc.status_code,
        },
    )
    content = exc.to_dict()
    req_id = get_request_id(request)
    if req_id:
        content["request_id"] = req_id
    return JSONResponse(status_code=exc.status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, app_exception_handler)


def get_request_id(request: Request) -> Optional[str]:
    """Retrieve the request ID from the current request."""
    return getattr(request.state, "request_id", None)


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "register_middlewares",
    "register_exception_handlers",
    "get_request_id",
]
