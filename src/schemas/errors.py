"""
Error response schemas for API endpoints.

Provides structured error bodies for OpenAPI documentation and consistent
error handling across the API.
"""
from pydantic import BaseModel, Field


class FieldError(BaseModel):
    """A single offending field in a rejected request."""

    field: str = Field(description="Dotted path of the offending field (camelCase)")
    message: str = Field(description="Human-readable reason")


class ErrorResponse(BaseModel):
    """Generic error body."""

    message: str


class ValidationErrorResponse(ErrorResponse):
    """Error body for 400 responses caused by malformed input."""

    errors: list[FieldError]


class UpstreamErrorResponse(ErrorResponse):
    """Error body when the external AI provider fails."""

    error: str | None = None
