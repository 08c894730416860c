"""
Currency entities.

Exchange rates are expressed against the user's default (base) currency,
which always carries a rate of 1.0.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Currency:
    """A currency enabled for a user, with its rate against the base currency."""

    code: str
    name: str = ""
    symbol: str = ""
    exchange_rate: float = 1.0
    is_default: bool = False
    id: str | None = None
    last_updated: datetime | None = None

    def __post_init__(self):
        """Normalize the ISO code."""
        self.code = self.code.strip().upper()


@dataclass
class CurrencyConversion:
    """Result of converting an amount between two currencies."""

    from_currency: str
    to_currency: str
    amount: float
    converted_amount: float
    rate: float
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class ExchangeRates:
    """Rates quoted by an external provider for one base currency."""

    base: str
    rates: dict[str, float]
    date: str | None = None


@dataclass
class RateRefreshResult:
    """Outcome of refreshing a list of currencies against fresh rates."""

    updated: int = 0
    errors: list[str] = field(default_factory=list)
    currencies: list[Currency] = field(default_factory=list)
