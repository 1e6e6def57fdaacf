"""Request correlation and access logging."""

import time
from collections.abc import Awaitable, Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from app.infrastructure.logging.logger import log_http_request

REQUEST_ID_HEADER = "X-Request-ID"


def request_id_of(request: Request) -> str:
    """
    Get the correlation id of a request.

    Args:
        request: Incoming request

    Returns:
        Id assigned by the middleware, or a fresh one when it is not installed
    """
    request_id = getattr(request.state, "request_id", None)
    if request_id is None:
        request_id = str(uuid4())
        request.state.request_id = request_id
    return request_id


def register_request_logging(app: FastAPI) -> None:
    """
    Assign a request id to every request and log its outcome.

    Args:
        app: FastAPI application
    """

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request.state.request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
        started = time.perf_counter()
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request.state.request_id
        log_http_request(
            request.state.request_id,
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response
