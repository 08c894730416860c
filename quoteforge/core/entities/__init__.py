"""Core domain entities."""

from quoteforge.core.entities.currency import (
    Currency,
    CurrencyConversion,
    ExchangeRates,
    RateRefreshResult,
)
from quoteforge.core.entities.permission import Permission, PermissionDefinition, UserRole
from quoteforge.core.entities.quote import (
    PROFESSION_FIELDS,
    CompanySettings,
    LineItem,
    Profession,
    QuoteData,
    ValidationResult,
)
from quoteforge.core.entities.recurring import (
    Frequency,
    RecurringInvoice,
    RecurringProcessResult,
)

__all__ = [
    # Quote entities
    "QuoteData",
    "LineItem",
    "CompanySettings",
    "Profession",
    "PROFESSION_FIELDS",
    "ValidationResult",
    # Currency entities
    "Currency",
    "CurrencyConversion",
    "ExchangeRates",
    "RateRefreshResult",
    # Recurring entities
    "Frequency",
    "RecurringInvoice",
    "RecurringProcessResult",
    # Permission entities
    "Permission",
    "PermissionDefinition",
    "UserRole",
]
