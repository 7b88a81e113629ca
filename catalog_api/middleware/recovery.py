# ==============================================================================
# RECOVERY MIDDLEWARE
# ==============================================================================
# Converts unhandled faults into a 500 envelope
# ==============================================================================

from __future__ import annotations

import logging
import traceback
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from catalog_api.core.constants import ErrorMessages

logger = logging.getLogger(__name__)


class RecoveryMiddleware(BaseHTTPMiddleware):
    """
    Catch anything the exception handlers did not render.

    Production responses carry only the generic message. Elsewhere the
    message is the fault itself and ``data.stack_trace`` holds the trace.

    Attributes:
        expose_errors: Include fault details in the response
    """

    def __init__(self, app, expose_errors: bool = False) -> None:
        super().__init__(app)
        self.expose_errors = expose_errors

    async def dispatch(
        self,
        request: Request,
        call_next: Callable,
    ) -> Response:
        """Run the request, turning a fault into an envelope."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                f"Unhandled error on {request.method} {request.url.path}: {exc}"
            )

            if self.expose_errors:
                message = str(exc) or exc.__class__.__name__
                data = {"stack_trace": traceback.format_exc()}
            else:
                message = ErrorMessages.INTERNAL_ERROR
                data = None

            return JSONResponse(
                status_code=500,
                content={
                    "status": "error",
                    "status_code": 500,
                    "data": data,
                    "message": message,
                },
            )
