"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from quoteforge.application.dto.requests import (
    ConvertCurrencyRequest,
    CurrencyRequest,
    GenerateHtmlRequest,
    ValidateQuoteRequest,
)
from quoteforge.application.dto.responses import (
    ConversionResponse,
    ErrorResponse,
    GenerateHtmlResponse,
    HealthResponse,
    ProfessionsResponse,
    ValidationResponse,
)

__all__ = [
    # Requests
    "GenerateHtmlRequest",
    "ValidateQuoteRequest",
    "ConvertCurrencyRequest",
    "CurrencyRequest",
    # Responses
    "GenerateHtmlResponse",
    "ValidationResponse",
    "ProfessionsResponse",
    "ConversionResponse",
    "HealthResponse",
    "ErrorResponse",
]
