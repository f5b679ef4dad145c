"""
Exercise Tracker - Shared Response Schemas
============================================

What:  Error, health and bulk-delete response models used across routers,
       plus the text cast shared by the request models.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


def loose_text(value: Any) -> Any:
    """
    Cast scalar JSON values to text the way a form field would arrive.

    123 → "123", 2.0 → "2", true → "true". Objects and arrays have no text
    form and become None, leaving the store to refuse a required field.
    """
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "User not found",
            "request_id": "1f0c9a2b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class DeleteResult(BaseModel):
    """Summary reported by a bulk delete."""
    acknowledged: bool = True
    deleted_count: int = Field(ge=0)


class DeleteResponse(BaseModel):
    """
    Body of the administrative delete endpoints.

    On failure the endpoint still answers 200, with only a failure message
    and no `result`.
    """
    message: str
    result: Optional[DeleteResult] = None


class HealthResponse(BaseModel):
    """Service health: overall status, store connectivity and uptime."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
