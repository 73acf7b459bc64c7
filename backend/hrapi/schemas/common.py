"""
HR API Backend — Shared Response Schemas
==========================================

What:  The success envelope, the error body and the health payload.
Who:   Used by every route module as `response_model`.

Envelope:
    Every 2xx response from a resource route has the same shape:
        {"status": "success", "data": <payload>, "message": "Branch created successfully"}
    Errors are flat:
        {"error": "Branch not found"}
"""

from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class SuccessResponse(BaseModel, Generic[DataT]):
    """Uniform wrapper for successful resource responses."""
    status: Literal["success"] = Field(default="success")
    data: DataT = Field(description="The requested or affected resource(s)")
    message: str = Field(description="Human-readable outcome, e.g. 'Branch created successfully'")


class ErrorResponse(BaseModel):
    """
    Error body for 4xx/5xx responses.

    request_id is only set by the server-error handlers, so support can match
    a failed call with its log lines.
    """
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Liveness payload returned by GET /api/v1/health."""
    status: int = Field(description="HTTP status of the service (200 when up)")
    uptime: float = Field(description="Seconds since the process started")
    timestamp: str = Field(description="Current server time (UTC ISO 8601)")
    version: str = Field(description="Application version")
