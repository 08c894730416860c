"""
Currency conversion and exchange rate maintenance.

All rates are relative to the default currency (rate 1.0). Amounts are in
major units throughout.
"""

from dataclasses import replace
from datetime import datetime

from babel.numbers import format_currency

from quoteforge.config import get_logger
from quoteforge.core.entities.currency import Currency, CurrencyConversion, RateRefreshResult
from quoteforge.core.exceptions import CurrencyError, CurrencyNotFoundError
from quoteforge.core.interfaces import IExchangeRateProvider

logger = get_logger(__name__)

FORMAT_LOCALE = "en_US"

# Currencies offered when a user adds one: (code, name, symbol)
COMMON_CURRENCIES: tuple[tuple[str, str, str], ...] = (
    ("USD", "US Dollar", "$"),
    ("EUR", "Euro", "€"),
    ("GBP", "British Pound", "£"),
    ("ZAR", "South African Rand", "R"),
    ("JPY", "Japanese Yen", "¥"),
    ("CAD", "Canadian Dollar", "C$"),
    ("AUD", "Australian Dollar", "A$"),
    ("CHF", "Swiss Franc", "CHF"),
    ("CNY", "Chinese Yuan", "¥"),
    ("INR", "Indian Rupee", "₹"),
    ("BRL", "Brazilian Real", "R$"),
    ("MXN", "Mexican Peso", "$"),
    ("SGD", "Singapore Dollar", "S$"),
    ("HKD", "Hong Kong Dollar", "HK$"),
    ("NOK", "Norwegian Krone", "kr"),
    ("SEK", "Swedish Krona", "kr"),
    ("DKK", "Danish Krone", "kr"),
    ("PLN", "Polish Zloty", "zł"),
    ("CZK", "Czech Koruna", "Kč"),
    ("HUF", "Hungarian Forint", "Ft"),
)


class CurrencyService:
    """
    Service for currency conversion and rate refresh.

    Works on currency lists supplied by the caller; persistence of the
    returned currencies is the caller's concern.
    """

    def __init__(self, rate_provider: IExchangeRateProvider | None = None):
        self._rate_provider = rate_provider

    @staticmethod
    def _find(code: str, currencies: list[Currency]) -> Currency | None:
        code = code.strip().upper()
        return next((c for c in currencies if c.code == code), None)

    def convert(
        self,
        amount: float,
        from_currency: str,
        to_currency: str,
        currencies: list[Currency],
    ) -> CurrencyConversion:
        """
        Convert an amount through the base currency.

        Raises:
            CurrencyNotFoundError: If either code is not in currencies.
        """
        source = self._find(from_currency, currencies)
        if source is None:
            raise CurrencyNotFoundError(from_currency)
        target = self._find(to_currency, currencies)
        if target is None:
            raise CurrencyNotFoundError(to_currency)
        if source.exchange_rate <= 0:
            raise CurrencyError(
                f"Invalid exchange rate for {source.code}: {source.exchange_rate}",
                code="INVALID_EXCHANGE_RATE",
                details={"currency_code": source.code, "rate": source.exchange_rate},
            )

        base_amount = amount / source.exchange_rate
        return CurrencyConversion(
            from_currency=source.code,
            to_currency=target.code,
            amount=amount,
            converted_amount=base_amount * target.exchange_rate,
            rate=target.exchange_rate / source.exchange_rate,
        )

    def get_exchange_rate(
        self,
        from_currency: str,
        to_currency: str,
        currencies: list[Currency],
    ) -> float | None:
        """Rate from one currency to another, or None if either is unknown."""
        if from_currency.strip().upper() == to_currency.strip().upper():
            return 1.0

        source = self._find(from_currency, currencies)
        target = self._find(to_currency, currencies)
        if source is None or target is None or source.exchange_rate <= 0:
            return None
        return target.exchange_rate / source.exchange_rate

    @staticmethod
    def format_amount(amount: float, currency: str = "USD") -> str:
        return format_currency(amount, currency.strip().upper(), locale=FORMAT_LOCALE)

    @staticmethod
    def get_available_currencies() -> list[Currency]:
        return [Currency(code=code, name=name, symbol=symbol) for code, name, symbol in COMMON_CURRENCIES]

    async def refresh_rates(self, currencies: list[Currency]) -> RateRefreshResult:
        """
        Refresh exchange rates against the default currency.

        The default currency is reset to 1.0 and not counted as updated.
        Currencies without a quoted rate keep their old rate and add an
        error message.
        """
        result = RateRefreshResult(currencies=list(currencies))

        default = next((c for c in currencies if c.is_default), None)
        if default is None:
            result.errors.append("No default currency set")
            return result

        if self._rate_provider is None:
            result.errors.append("No exchange rate provider configured")
            return result

        try:
            rates = await self._rate_provider.fetch_rates(default.code)
        except CurrencyError as e:
            logger.warning("exchange_rate_fetch_failed", base=default.code, error=str(e))
            result.errors.append("Failed to fetch exchange rates")
            return result

        now = datetime.now()
        refreshed: list[Currency] = []
        for currency in currencies:
            if currency.code == default.code:
                refreshed.append(replace(currency, exchange_rate=1.0, last_updated=now))
                continue

            rate = rates.rates.get(currency.code)
            if rate:
                refreshed.append(replace(currency, exchange_rate=float(rate), last_updated=now))
                result.updated += 1
            else:
                refreshed.append(currency)
                result.errors.append(f"No exchange rate found for {currency.code}")

        result.currencies = refreshed
        logger.info(
            "exchange_rates_refreshed",
            base=default.code,
            updated=result.updated,
            errors=len(result.errors),
        )
        return result
