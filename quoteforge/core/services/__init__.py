"""
Core business logic services.

Layer-pure services that depend only on:
- quoteforge/core/entities/*
- quoteforge/core/interfaces/*
- quoteforge/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from quoteforge.core.services.currency_service import COMMON_CURRENCIES, CurrencyService
from quoteforge.core.services.pdf_generator_service import PdfGeneratorService
from quoteforge.core.services.permission_service import (
    PREDEFINED_ROLES,
    SYSTEM_PERMISSIONS,
    PermissionService,
    get_permissions_by_category,
    permissions_for_role,
)
from quoteforge.core.services.recurring_invoice_service import (
    RecurringInvoiceService,
    calculate_next_date,
    get_frequency_text,
)

__all__ = [
    # Document generation
    "PdfGeneratorService",
    # Currency
    "CurrencyService",
    "COMMON_CURRENCIES",
    # Recurring invoices
    "RecurringInvoiceService",
    "calculate_next_date",
    "get_frequency_text",
    # Permissions
    "PermissionService",
    "SYSTEM_PERMISSIONS",
    "PREDEFINED_ROLES",
    "permissions_for_role",
    "get_permissions_by_category",
]
