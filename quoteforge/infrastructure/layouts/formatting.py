"""
Formatting helpers shared by all document layouts.

Currency and date output goes through Babel with a fixed locale so that a
given quote always renders to the same bytes regardless of host settings.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency as babel_format_currency
from dateutil.parser import isoparse

DOCUMENT_LOCALE = "en_US"
DEFAULT_CURRENCY = "USD"
DATE_PATTERN = "M/d/yyyy"


def format_currency(amount: float, currency: str | None = None) -> str:
    """Format an amount in major units, e.g. 115 USD -> "$115.00".

    Currency codes are case-insensitive.
    """
    code = (currency or "").strip().upper() or DEFAULT_CURRENCY
    return babel_format_currency(
        amount,
        code,
        locale=DOCUMENT_LOCALE,
    )


def parse_date(value: str) -> datetime:
    """Parse an ISO 8601 date or timestamp.

    Raises:
        ValueError: If the value is empty or not ISO 8601.
    """
    if not value:
        raise ValueError("Empty date value")
    return isoparse(value)


def format_date(value: str) -> str:
    """Format an ISO date as a short numeric US date ("2024-01-31" -> "1/31/2024")."""
    return babel_format_date(parse_date(value).date(), format=DATE_PATTERN, locale=DOCUMENT_LOCALE)


def format_quantity(value: float) -> str:
    """Render whole quantities without a fractional part."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return str(number)


def format_percentage(numerator: float, denominator: float) -> str:
    """Ratio as a two-decimal percentage; "0.00" when the denominator is not positive."""
    if denominator <= 0:
        return "0.00"
    return f"{numerator / denominator * 100:.2f}"


def distinct_values(items: Iterable[Any], field: str) -> list[Any]:
    """Collect truthy values of one attribute, deduplicated in first-seen order."""
    return list(dict.fromkeys(value for item in items if (value := getattr(item, field, None))))
