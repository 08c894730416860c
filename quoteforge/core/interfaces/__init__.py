"""Core interfaces (ports) for dependency injection."""

from quoteforge.core.interfaces.layout import ILayoutFactory, ILayoutStrategy
from quoteforge.core.interfaces.rates import IExchangeRateProvider
from quoteforge.core.interfaces.recurring import (
    IRecurringInvoiceGenerator,
    IRecurringInvoiceStore,
)

__all__ = [
    "ILayoutStrategy",
    "ILayoutFactory",
    "IExchangeRateProvider",
    "IRecurringInvoiceStore",
    "IRecurringInvoiceGenerator",
]
