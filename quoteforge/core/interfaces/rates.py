"""Abstract interface for exchange rate sources."""

from abc import ABC, abstractmethod

from quoteforge.core.entities.currency import ExchangeRates


class IExchangeRateProvider(ABC):
    """Interface for fetching current exchange rates."""

    @abstractmethod
    async def fetch_rates(self, base_currency: str = "USD") -> ExchangeRates:
        """Fetch rates quoted against base_currency."""
        pass
