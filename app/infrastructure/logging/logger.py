"""Structured logger for observability."""

import logging
from typing import Any

_logger = logging.getLogger("edu_consultancy_api")
_logger.setLevel(logging.INFO)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    handler.setLevel(logging.INFO)
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a request.

    Args:
        request_id: Request correlation identifier (UUID string)
        component: Component name (e.g., 'http', 'intake', 'storage')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    log_message = " | ".join(log_parts)

    _logger.log(level, log_message)


def log_http_request(
    request_id: str,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    **kwargs: Any,
) -> None:
    """
    Log a completed HTTP request.

    Args:
        request_id: Request correlation identifier
        method: HTTP method
        path: URL path
        status_code: Response status code
        duration_ms: Handling time in milliseconds
        **kwargs: Additional fields
    """
    level = logging.WARNING if status_code >= 400 else logging.INFO
    if status_code >= 500:
        level = logging.ERROR
    log_event(
        request_id=request_id,
        component="http",
        level=level,
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=round(duration_ms, 1),
        **kwargs,
    )


# Export logger instance for direct use
logger = _logger
