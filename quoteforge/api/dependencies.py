"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from quoteforge.application.services import get_currency_service, get_pdf_generator_service
from quoteforge.application.use_cases import GenerateQuoteHtmlUseCase
from quoteforge.core.services import CurrencyService, PdfGeneratorService


def get_generator() -> PdfGeneratorService:
    """Get quote document generator."""
    return get_pdf_generator_service()


def get_currency() -> CurrencyService:
    """Get currency service."""
    return get_currency_service()


def get_generate_quote_html_use_case() -> GenerateQuoteHtmlUseCase:
    """Get quote HTML generation use case."""
    return GenerateQuoteHtmlUseCase(generator=get_pdf_generator_service())
