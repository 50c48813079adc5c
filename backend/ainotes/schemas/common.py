"""
AI Notes Backend — Shared Pydantic Schemas
==========================================

What:  The camelCase base model used by every request/response contract,
       plus the error and health response models.
Why:   Clients speak camelCase (`ownerId`, `sourceType`); Python code keeps
       snake_case attributes. The alias generator bridges the two, and
       `populate_by_name` lets snake_case input through as well.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for all API contracts: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def reject_null(value):
    """
    Field validator body for optional-but-not-nullable update fields.

    Omitting the field leaves the column alone; sending an explicit null for
    a NOT NULL column is a client error rather than a silent no-op.
    """
    if value is None:
        raise ValueError("may not be null")
    return value


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Document not found.",
            "request_id": "1f0c2a9e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for container and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
