# ==============================================================================
# RATE LIMITER MIDDLEWARE
# ==============================================================================
# Fixed window rate limiting keyed by client IP
# ==============================================================================

from __future__ import annotations

import math
import time
from typing import Callable, Dict, Optional, Tuple

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from catalog_api.core.constants import APIConstants, ErrorMessages
from catalog_api.core.exceptions import RateLimitError
from catalog_api.middleware.request_logger import client_ip


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    Rate limiting middleware using a fixed window per client.

    A client's window opens on its first request; the count resets when the
    window ends. Expired windows are evicted at most once per window.

    Attributes:
        requests_limit: Maximum requests per window
        window_seconds: Window length in seconds
        _windows: Client id -> (window start, request count)
    """

    def __init__(
        self,
        app,
        requests_limit: int,
        window_seconds: float,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        super().__init__(app)
        self.requests_limit = requests_limit
        self.window_seconds = window_seconds
        self._clock = clock or time.monotonic
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._last_sweep = self._clock()

    def _is_exempt(self, path: str) -> bool:
        return path == APIConstants.HEALTH_PATH or path in APIConstants.DOCS_PATHS

    def _sweep(self, now: float) -> None:
        """Drop windows that have ended."""
        if now - self._last_sweep < self.window_seconds:
            return
        self._windows = {
            client: window
            for client, window in self._windows.items()
            if now - window[0] < self.window_seconds
        }
        self._last_sweep = now

    def _check_rate_limit(self, client_id: str) -> Tuple[bool, int, int]:
        """
        Count a request against the client's window.

        Returns:
            Tuple of (allowed, remaining, seconds until reset)
        """
        now = self._clock()
        self._sweep(now)

        window_start, count = self._windows.get(client_id, (now, 0))
        if now - window_start >= self.window_seconds:
            window_start, count = now, 0

        count += 1
        self._windows[client_id] = (window_start, count)

        reset_in = max(1, math.ceil(window_start + self.window_seconds - now))
        remaining = max(0, self.requests_limit - count)
        return count <= self.requests_limit, remaining, reset_in

    def _headers(self, remaining: int, reset_in: int) -> Dict[str, str]:
        return {
            APIConstants.RATE_LIMIT_HEADER: str(self.requests_limit),
            APIConstants.RATE_LIMIT_REMAINING_HEADER: str(remaining),
            APIConstants.RATE_LIMIT_RESET_HEADER: str(reset_in),
        }

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Process request through rate limiter."""
        if self._is_exempt(request.url.path):
            return await call_next(request)

        allowed, remaining, reset_in = self._check_rate_limit(client_ip(request))

        if not allowed:
            error = RateLimitError(ErrorMessages.RATE_LIMIT_EXCEEDED, retry_after=reset_in)
            return JSONResponse(
                status_code=error.status_code,
                content=error.to_dict(),
                headers={
                    **self._headers(0, reset_in),
                    "Retry-After": str(reset_in),
                },
            )

        response = await call_next(request)
        response.headers.update(self._headers(remaining, reset_in))
        return response
