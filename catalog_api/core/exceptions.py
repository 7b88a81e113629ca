# ==============================================================================
# CUSTOM EXCEPTIONS - Application Error Hierarchy
# ==============================================================================
# Structured exception classes for consistent error handling
# Each exception maps to an HTTP status code and renders the envelope
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict, Optional


class AppException(Exception):
    """
    Base exception for all application errors.

    Provides a consistent interface for error handling with:
    - Error code for programmatic identification (logs only)
    - HTTP status code mapping
    - Human-readable message returned to the client

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable error identifier
        status_code: HTTP status code to return
        details: Additional context for logs

    Example:
        >>> raise AppException(
        ...     message="Something went wrong",
        ...     error_code="INTERNAL_ERROR",
        ...     status_code=500
        ... )
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error_code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to the response envelope.

        Returns:
            Dictionary with status, status_code, data and message
        """
        return {
            "status": "error",
            "status_code": self.status_code,
            "data": None,
            "message": self.message,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message='{self.message}', "
            f"error_code='{self.error_code}', "
            f"status_code={self.status_code})"
        )


# ==============================================================================
# CONFIGURATION EXCEPTIONS
# ==============================================================================

class ConfigurationError(Exception):
    """
    Raised when the resolved configuration cannot be served.

    Not an HTTP error: it aborts startup before any traffic is accepted
    (e.g. an unknown DB_DRIVER).
    """


# ==============================================================================
# DATABASE EXCEPTIONS
# ==============================================================================

class DatabaseError(AppException):
    """
    Raised when a persistence operation fails.

    Wraps driver/ORM errors so the client only sees a generic
    "Failed to <verb> <entity>" message.
    """

    def __init__(
        self,
        message: str = "Database operation failed",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            status_code=500,
            details=details,
        )


class DatabaseConnectionError(DatabaseError):
    """
    Raised when database connection cannot be established.
    """

    def __init__(
        self,
        message: str = "Failed to connect to database",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
        self.error_code = "DATABASE_CONNECTION_ERROR"


# ==============================================================================
# RESOURCE EXCEPTIONS
# ==============================================================================

class NotFoundError(AppException):
    """
    Raised when a requested resource does not exist.

    Maps to HTTP 404 Not Found.

    Attributes:
        resource_type: Type of resource that was not found
        resource_id: Identifier of the missing resource
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[Any] = None,
    ) -> None:
        details = {}
        if resource_type:
            details["resource_type"] = resource_type
        if resource_id is not None:
            details["resource_id"] = str(resource_id)

        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=details,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ==============================================================================
# INPUT EXCEPTIONS
# ==============================================================================

class BadRequestError(AppException):
    """
    Raised for malformed requests (unparseable or mistyped body).

    Maps to HTTP 400 Bad Request.
    """

    def __init__(
        self,
        message: str = "Bad request",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="BAD_REQUEST",
            status_code=400,
            details=details,
        )


class ValidationError(AppException):
    """
    Raised when a parsed payload breaks one or more field rules.

    Maps to HTTP 400. The message is the violations joined together.
    """

    def __init__(
        self,
        violations: list[str],
    ) -> None:
        super().__init__(
            message="; ".join(violations) or "Validation error",
            error_code="VALIDATION_ERROR",
            status_code=400,
            details={"violations": list(violations)},
        )
        self.violations = list(violations)


class ReferenceNotFoundError(BadRequestError):
    """
    Raised when a foreign key points at a row that does not exist.

    Attributes:
        field: Name of the offending foreign-key field
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        reference_id: Optional[Any] = None,
    ) -> None:
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if reference_id is not None:
            details["reference_id"] = str(reference_id)
        super().__init__(message=message, details=details)
        self.error_code = "REFERENCE_NOT_FOUND"
        self.field = field


# ==============================================================================
# RATE LIMITING EXCEPTIONS
# ==============================================================================

class RateLimitError(AppException):
    """
    Raised when rate limit is exceeded.

    Maps to HTTP 429 Too Many Requests.

    Attributes:
        retry_after: Seconds until the client can retry
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: int = 60,
    ) -> None:
        super().__init__(
            message=message,
            error_code="RATE_LIMIT_EXCEEDED",
            status_code=429,
            details={"retry_after_seconds": retry_after},
        )
        self.retry_after = retry_after
