# ==============================================================================
# MIDDLEWARE PACKAGE INITIALIZATION
# ==============================================================================

"""
Middleware
==========

HTTP middleware chain, outermost first:
1. RequestLoggerMiddleware: access log and tracing headers
2. RecoveryMiddleware: unhandled faults become a 500 envelope
3. CORSMiddleware: permissive outside production, allowlist in production
4. SecurityHeadersMiddleware: production, ENABLE_HELMET
5. RateLimitMiddleware: production, ENABLE_RATE_LIMITER
"""

from __future__ import annotations

from typing import List

from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from catalog_api.core.settings import Settings
from catalog_api.middleware.rate_limiter import RateLimitMiddleware
from catalog_api.middleware.recovery import RecoveryMiddleware
from catalog_api.middleware.request_logger import RequestLoggerMiddleware
from catalog_api.middleware.security_headers import SecurityHeadersMiddleware

# Production CORS surface
CORS_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization"]


def build_middleware(settings: Settings) -> List[Middleware]:
    """
    Build the ordered middleware list for ``FastAPI(middleware=...)``.

    Args:
        settings: Resolved application settings

    Returns:
        Middleware definitions, outermost first
    """
    chain = [
        Middleware(RequestLoggerMiddleware),
        Middleware(RecoveryMiddleware, expose_errors=not settings.is_production),
    ]

    if not settings.is_production:
        chain.append(
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["*"],
                allow_headers=["Origin", "Content-Type", "Accept"],
            )
        )
        return chain

    if settings.FRONTEND_ORIGINS:
        chain.append(
            Middleware(
                CORSMiddleware,
                allow_origins=list(settings.FRONTEND_ORIGINS),
                allow_methods=CORS_METHODS,
                allow_headers=CORS_HEADERS,
                allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
            )
        )

    if settings.ENABLE_HELMET:
        chain.append(Middleware(SecurityHeadersMiddleware))

    if settings.ENABLE_RATE_LIMITER:
        chain.append(
            Middleware(
                RateLimitMiddleware,
                requests_limit=settings.RATE_LIMIT_MAX,
                window_seconds=settings.RATE_LIMIT_WINDOW,
            )
        )

    return chain


__all__ = [
    "build_middleware",
    "RateLimitMiddleware",
    "RecoveryMiddleware",
    "RequestLoggerMiddleware",
    "SecurityHeadersMiddleware",
]
