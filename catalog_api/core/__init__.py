# ==============================================================================
# CORE PACKAGE INITIALIZATION
# ==============================================================================
# Core utilities: Settings, Logging, Exceptions, Constants
# ==============================================================================

"""
Core Module
===========

Contains core utilities and configurations for the application:
- settings: Environment configuration management
- logging: Console / file logging setup
- exceptions: Custom exception classes
- constants: Application-wide constants
"""

from catalog_api.core.settings import Settings, get_settings, DatabaseType, Environment
from catalog_api.core.exceptions import (
    AppException,
    BadRequestError,
    ConfigurationError,
    DatabaseError,
    NotFoundError,
    RateLimitError,
    ReferenceNotFoundError,
    ValidationError,
)

__all__ = [
    "Settings",
    "get_settings",
    "DatabaseType",
    "Environment",
    "AppException",
    "BadRequestError",
    "ConfigurationError",
    "DatabaseError",
    "NotFoundError",
    "RateLimitError",
    "ReferenceNotFoundError",
    "ValidationError",
]
