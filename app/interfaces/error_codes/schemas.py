"""
Pydantic schemas for the error codes API.

These schemas define the API contract. No business logic belongs here.
"""

from pydantic import BaseModel, Field


class ErrorDescriptorResponse(BaseModel):
    """An error descriptor as seen by API clients."""

    code: int = Field(..., description="Numeric status code")
    message: str = Field(..., description="Human-readable message")


class ErrorCatalogResponse(BaseModel):
    """The externally visible part of the error catalog."""

    internal_error_limit: int = Field(
        ..., description="Codes at or below this value are reported generically"
    )
    errors: list[ErrorDescriptorResponse]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    error_codes: int


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    code: int
    message: str
    detail: str | None = None
