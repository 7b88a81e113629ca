# ==============================================================================
# BASE SCHEMAS - Common Schema Patterns
# ==============================================================================
# Foundation schemas for the response envelope and request payloads
# ==============================================================================

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field


# Type variable for generic response types
T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All response schemas inherit from this class
    to ensure consistent serialization behavior.
    """

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode
        populate_by_name=True,
    )


class PayloadSchema(BaseModel):
    """
    Base for request bodies.

    Fields are optional so that missing values reach the validators and are
    reported as rule violations. Types are strict: a string where a number
    belongs is a malformed body. Unknown keys (including ``id``) are ignored.
    """

    model_config = ConfigDict(
        strict=True,
        extra="ignore",
    )


class TimestampSchema(BaseSchema):
    """Schema with automatic timestamp fields."""

    created_at: Optional[datetime] = Field(
        None,
        description="Record creation timestamp"
    )
    updated_at: Optional[datetime] = Field(
        None,
        description="Last update timestamp"
    )


class APIResponse(BaseModel, Generic[T]):
    """
    Standard API response envelope.

    Every response except 204 uses this structure.

    Attributes:
        status: "success" or "error"
        status_code: Mirrors the HTTP status code
        data: Response payload (null on errors)
        message: Human-readable status message
    """

    status: Literal["success", "error"] = Field(
        "success",
        description="Outcome of the request"
    )
    status_code: int = Field(
        200,
        description="HTTP status code"
    )
    data: Optional[T] = Field(
        None,
        description="Response data"
    )
    message: str = Field(
        "",
        description="Status message"
    )

    @classmethod
    def ok(
        cls,
        data: T,
        message: str,
        status_code: int = 200,
    ) -> "APIResponse[T]":
        """Create a successful response."""
        return cls(status="success", status_code=status_code, data=data, message=message)

    @classmethod
    def error(
        cls,
        message: str,
        status_code: int,
        data: Optional[T] = None,
    ) -> "APIResponse[T]":
        """Create an error response."""
        return cls(status="error", status_code=status_code, data=data, message=message)


class DatabaseStats(BaseModel):
    """Database section of the health report."""

    status: Literal["connected", "disconnected"]
    driver: str


class HealthResponse(BaseModel):
    """Health check payload with process runtime statistics."""

    status: str = Field(..., description="Liveness status")
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    uptime_seconds: float = Field(..., description="Seconds since startup")
    uptime: str = Field(..., description="Human-readable uptime")
    python_version: str
    os: str
    arch: str
    cpu_cores: Optional[int] = None
    threads: int
    memory: Dict[str, int] = Field(
        default_factory=dict,
        description="Process memory in bytes (rss, vms)"
    )
    gc_counts: Dict[str, int] = Field(
        default_factory=dict,
        description="Pending objects per GC generation"
    )
    database: DatabaseStats
    timestamp: datetime


def request_body_schema(model: Any, example: Dict[str, Any]) -> Dict[str, Any]:
    """
    Build an ``openapi_extra`` request body entry for a payload model.

    Handlers read the raw body themselves, so FastAPI cannot infer it.
    """
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": model.model_json_schema(),
                    "example": example,
                }
            },
        }
    }
