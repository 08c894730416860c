"""
HTTP exchange rate provider.

Queries the primary rates API and falls back to the secondary API when the
primary does not answer with a success status.
"""

import httpx

from quoteforge.config import get_logger, get_settings
from quoteforge.core.entities.currency import ExchangeRates
from quoteforge.core.exceptions import ExchangeRateUnavailableError
from quoteforge.core.interfaces import IExchangeRateProvider

logger = get_logger(__name__)


class HttpExchangeRateProvider(IExchangeRateProvider):
    """
    Exchange rates over HTTP.

    Primary endpoint: {base_url}/{BASE}
    Fallback endpoint: {fallback_url}?base={BASE}
    """

    def __init__(
        self,
        base_url: str | None = None,
        fallback_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.rates.base_url).rstrip("/")
        self.fallback_url = fallback_url or settings.rates.fallback_url
        self.timeout = timeout or settings.rates.timeout
        self._transport = transport

    async def fetch_rates(self, base_currency: str = "USD") -> ExchangeRates:
        """
        Fetch rates quoted against base_currency.

        Raises:
            ExchangeRateUnavailableError: If neither endpoint succeeds.
        """
        base = base_currency.strip().upper()

        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                response = await client.get(f"{self.base_url}/{base}")
                if not response.is_success:
                    logger.warning(
                        "exchange_rate_primary_failed",
                        base=base,
                        status_code=response.status_code,
                    )
                    response = await client.get(self.fallback_url, params={"base": base})
            except httpx.HTTPError as e:
                raise ExchangeRateUnavailableError(base, str(e)) from e

            if not response.is_success:
                raise ExchangeRateUnavailableError(base, f"HTTP {response.status_code}")

            try:
                data = response.json()
            except ValueError as e:
                raise ExchangeRateUnavailableError(base, "Invalid JSON response") from e

        try:
            rates = {code.upper(): float(rate) for code, rate in (data.get("rates") or {}).items()}
            quoted_base = (data.get("base") or base).upper()
        except (AttributeError, TypeError, ValueError) as e:
            raise ExchangeRateUnavailableError(base, "Invalid rates payload") from e

        logger.info("exchange_rates_fetched", base=base, count=len(rates))

        return ExchangeRates(
            base=quoted_base,
            rates=rates,
            date=data.get("date"),
        )
