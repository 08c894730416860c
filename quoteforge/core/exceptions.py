"""
Domain exceptions for the QuoteForge application.

Provides specific exception types for different error scenarios.
Rendering failures are deliberately not wrapped: they surface as the
original exception raised by the failing section.
"""

from typing import Any


class QuoteForgeError(Exception):
    """Base exception for all QuoteForge errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(QuoteForgeError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value else None,
            },
        )


class QuoteValidationError(ValidationError):
    """Quote data failed pre-render validation."""

    def __init__(self, quote_number: str | None, errors: list[str]):
        super().__init__(
            field="quote_data",
            message="; ".join(errors),
        )
        self.code = "QUOTE_VALIDATION_FAILED"
        self.errors = list(errors)
        self.details.update(
            {
                "quote_number": quote_number,
                "errors": self.errors,
            }
        )


# Currency Exceptions
class CurrencyError(QuoteForgeError):
    """Base exception for currency operations."""

    pass


class CurrencyNotFoundError(CurrencyError):
    """Currency code is not configured."""

    def __init__(self, currency_code: str):
        super().__init__(
            f"Currency not found: {currency_code}",
            code="CURRENCY_NOT_FOUND",
            details={"currency_code": currency_code},
        )


class ExchangeRateUnavailableError(CurrencyError):
    """No exchange rate source answered."""

    def __init__(self, base_currency: str, reason: str | None = None):
        super().__init__(
            f"Exchange rates unavailable for base {base_currency}"
            + (f" - {reason}" if reason else ""),
            code="EXCHANGE_RATE_UNAVAILABLE",
            details={"base_currency": base_currency, "reason": reason},
        )


# Recurring invoice Exceptions
class RecurringInvoiceError(QuoteForgeError):
    """Error while processing a recurring invoice schedule."""

    def __init__(self, recurring_id: str, reason: str):
        super().__init__(
            f"Recurring invoice {recurring_id} failed: {reason}",
            code="RECURRING_INVOICE_FAILED",
            details={"recurring_id": recurring_id, "reason": reason},
        )


# Permission Exceptions
class PermissionDeniedError(QuoteForgeError):
    """User role lacks the requested permission."""

    def __init__(self, resource: str, action: str, role: str | None = None):
        super().__init__(
            f"Permission denied: {action} on {resource}",
            code="PERMISSION_DENIED",
            details={"resource": resource, "action": action, "role": role},
        )


class ConfigurationError(QuoteForgeError):
    """Configuration error."""

    pass
