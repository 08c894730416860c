"""Exchange rate providers."""

from quoteforge.infrastructure.rates.exchange_rate_client import HttpExchangeRateProvider

__all__ = ["HttpExchangeRateProvider"]
