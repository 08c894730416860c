"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from quoteforge.core.services import CurrencyService, PdfGeneratorService

if TYPE_CHECKING:
    from quoteforge.core.interfaces import IExchangeRateProvider, ILayoutFactory


# Singleton service instances
_pdf_generator_service: PdfGeneratorService | None = None
_currency_service: CurrencyService | None = None


def get_pdf_generator_service(
    layout_factory: "ILayoutFactory | None" = None,
) -> PdfGeneratorService:
    """
    Get or create PdfGeneratorService instance.

    Args:
        layout_factory: Optional layout factory override

    Returns:
        Configured PdfGeneratorService
    """
    global _pdf_generator_service

    if _pdf_generator_service is not None and layout_factory is None:
        return _pdf_generator_service

    # Lazy import infrastructure to avoid circular imports
    from quoteforge.infrastructure.layouts import get_layout_factory

    service = PdfGeneratorService(layout_factory=layout_factory or get_layout_factory())

    if layout_factory is None:
        _pdf_generator_service = service

    return service


def get_currency_service(
    rate_provider: "IExchangeRateProvider | None" = None,
) -> CurrencyService:
    """
    Get or create CurrencyService instance.

    Args:
        rate_provider: Optional exchange rate provider override

    Returns:
        Configured CurrencyService
    """
    global _currency_service

    if _currency_service is not None and rate_provider is None:
        return _currency_service

    from quoteforge.infrastructure.rates import HttpExchangeRateProvider

    service = CurrencyService(rate_provider=rate_provider or HttpExchangeRateProvider())

    if rate_provider is None:
        _currency_service = service

    return service


def reset_services() -> None:
    """Reset all singleton services (for testing)."""
    global _pdf_generator_service, _currency_service

    _pdf_generator_service = None
    _currency_service = None
