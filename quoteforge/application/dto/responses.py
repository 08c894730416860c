"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class GenerateHtmlResponse(BaseModel):
    """Rendered quote document."""

    success: bool = Field(default=True)
    html: str = Field(..., description="Self-contained HTML document")


class ValidationResponse(BaseModel):
    """Quote validation outcome."""

    is_valid: bool = Field(..., description="True when no errors were found")
    errors: list[str] = Field(default_factory=list, description="Validation messages")


class ProfessionsResponse(BaseModel):
    """Supported document layouts."""

    professions: list[str] = Field(..., description="Canonical profession names")
    default: str = Field(..., description="Profession used when none is given")


class ConversionResponse(BaseModel):
    """Currency conversion result."""

    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    rate: float
    formatted: str = Field(..., description="Converted amount formatted for display")
    timestamp: datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. CURRENCY_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    errors: list[str] | None = Field(default=None, description="Individual validation messages")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
