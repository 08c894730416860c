"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from quoteforge.application.dto import (
    ConversionResponse,
    ConvertCurrencyRequest,
    ErrorResponse,
    GenerateHtmlRequest,
    GenerateHtmlResponse,
    HealthResponse,
    ProfessionsResponse,
    ValidateQuoteRequest,
    ValidationResponse,
)
from quoteforge.application.services import (
    get_currency_service,
    get_pdf_generator_service,
    reset_services,
)
from quoteforge.application.use_cases import GenerateQuoteHtmlUseCase

__all__ = [
    # Request DTOs
    "GenerateHtmlRequest",
    "ValidateQuoteRequest",
    "ConvertCurrencyRequest",
    # Response DTOs
    "GenerateHtmlResponse",
    "ValidationResponse",
    "ProfessionsResponse",
    "ConversionResponse",
    "HealthResponse",
    "ErrorResponse",
    # Use Cases
    "GenerateQuoteHtmlUseCase",
    # Service factories
    "get_pdf_generator_service",
    "get_currency_service",
    "reset_services",
]
