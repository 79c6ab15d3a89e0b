"""Standardized error response schema."""

from pydantic import BaseModel, Field


class ErrorItem(BaseModel):
    """A single business rule or field error."""

    name: str | None = Field(None, description="Name of the violated business rule")
    field: str | None = Field(None, description="Request field the error refers to")
    message: str = Field(..., description="Human-readable error message")


class ErrorResponse(BaseModel):
    """Standard error body for domain exceptions (4xx) and storage failures (5xx)."""

    detail: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    errors: list[ErrorItem] | None = Field(None, description="Individual errors, when there are several")
