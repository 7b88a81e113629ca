# ==============================================================================
# REQUEST LOGGER MIDDLEWARE
# ==============================================================================
# One access line per request, plus tracing headers
# ==============================================================================

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from catalog_api.core.constants import APIConstants
from catalog_api.core.logging import ACCESS_LOGGER_NAME

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


def client_ip(request: Request) -> str:
    """
    Get the client's socket address.

    Forwarding headers are not read here; behind a trusted proxy, run
    uvicorn with ``--proxy-headers`` so the socket address is rewritten.
    """
    if request.client:
        return request.client.host

    return "unknown"


def format_access_line(
    timestamp: datetime,
    status_code: int,
    duration_ms: float,
    method: str,
    path: str,
    ip: str,
) -> str:
    """Render ``[time] | status | latency | METHOD path | ip``."""
    return (
        f"[{timestamp.isoformat(timespec='seconds')}] | {status_code} | "
        f"{duration_ms:.3f}ms | {method} {path} | {ip}"
    )


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request/response access logging.

    Writes the access line through the access logger (stdout and, when
    enabled, the log file). Adds request ID and timing headers.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request with logging."""
        # Generate request ID
        request_id = str(uuid.uuid4())[:8]

        # Start timing
        started_at = datetime.now().astimezone()
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.perf_counter() - start_time) * 1000
            access_logger.error(
                format_access_line(
                    started_at, 500, duration_ms,
                    request.method, request.url.path, client_ip(request),
                )
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        access_logger.info(
            format_access_line(
                started_at, response.status_code, duration_ms,
                request.method, request.url.path, client_ip(request),
            )
        )

        # Add headers
        response.headers[APIConstants.REQUEST_ID_HEADER] = request_id
        response.headers[APIConstants.RESPONSE_TIME_HEADER] = f"{duration_ms:.2f}ms"

        return response
