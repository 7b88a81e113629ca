# ==============================================================================
# APPLICATION CONSTANTS - Centralized Configuration Values
# ==============================================================================
# Immutable constants used throughout the application
# ==============================================================================

from __future__ import annotations

from typing import Final


# ==============================================================================
# API CONSTANTS
# ==============================================================================

class APIConstants:
    """API-related constants."""

    # Pagination defaults
    DEFAULT_PAGE: Final[int] = 1
    DEFAULT_PAGE_SIZE: Final[int] = 10

    # Response headers
    RATE_LIMIT_HEADER: Final[str] = "X-RateLimit-Limit"
    RATE_LIMIT_REMAINING_HEADER: Final[str] = "X-RateLimit-Remaining"
    RATE_LIMIT_RESET_HEADER: Final[str] = "X-RateLimit-Reset"
    REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
    RESPONSE_TIME_HEADER: Final[str] = "X-Response-Time"

    # Paths that bypass the rate limiter
    DOCS_PATHS: Final[frozenset] = frozenset({"/docs", "/redoc", "/openapi.json"})
    HEALTH_PATH: Final[str] = "/health"


# ==============================================================================
# DATABASE CONSTANTS
# ==============================================================================

class DatabaseConstants:
    """Database-related constants."""

    # Collection/Table names
    BRANDS_COLLECTION: Final[str] = "brands"
    CATEGORIES_COLLECTION: Final[str] = "categories"
    PRODUCTS_COLLECTION: Final[str] = "products"

    # Column bounds
    NAME_MIN_LENGTH: Final[int] = 2
    NAME_MAX_LENGTH: Final[int] = 100

    # Largest primary key a signed 64-bit column can hold
    MAX_ID: Final[int] = 2**63 - 1


# ==============================================================================
# ERROR MESSAGES
# ==============================================================================

class ErrorMessages:
    """Standardized error messages."""

    # Parsing
    INVALID_REQUEST_BODY: Final[str] = "Invalid request body"
    INVALID_INPUT: Final[str] = "Invalid input"

    # Foreign keys
    INVALID_CATEGORY_ID: Final[str] = "Invalid CategoryID"
    INVALID_BRAND_ID: Final[str] = "Invalid BrandID"

    # Infrastructure
    INTERNAL_ERROR: Final[str] = "Internal server error"
    RATE_LIMIT_EXCEEDED: Final[str] = "Too many requests. Calm down, champ."
