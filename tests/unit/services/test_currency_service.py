"""Tests for CurrencyService."""

from unittest.mock import AsyncMock

import pytest

from quoteforge.core.entities.currency import Currency, ExchangeRates
from quoteforge.core.exceptions import (
    CurrencyError,
    CurrencyNotFoundError,
    ExchangeRateUnavailableError,
)
from quoteforge.core.services.currency_service import CurrencyService


@pytest.fixture
def currencies() -> list[Currency]:
    return [
        Currency(code="USD", name="US Dollar", symbol="$", exchange_rate=1.0, is_default=True),
        Currency(code="EUR", name="Euro", symbol="€", exchange_rate=0.9),
        Currency(code="GBP", name="British Pound", symbol="£", exchange_rate=0.8),
    ]


@pytest.fixture
def rate_provider() -> AsyncMock:
    provider = AsyncMock()
    provider.fetch_rates.return_value = ExchangeRates(
        base="USD",
        rates={"USD": 1.0, "EUR": 0.92},
        date="2024-01-01",
    )
    return provider


class TestConvert:
    def test_from_base(self, currencies):
        conversion = CurrencyService().convert(100, "USD", "EUR", currencies)
        assert conversion.converted_amount == pytest.approx(90.0)
        assert conversion.rate == pytest.approx(0.9)
        assert conversion.from_currency == "USD"
        assert conversion.to_currency == "EUR"
        assert conversion.amount == 100

    def test_cross_rate_through_base(self, currencies):
        conversion = CurrencyService().convert(90, "EUR", "GBP", currencies)
        assert conversion.converted_amount == pytest.approx(80.0)
        assert conversion.rate == pytest.approx(0.8 / 0.9)

    def test_codes_case_insensitive(self, currencies):
        conversion = CurrencyService().convert(10, "usd", "gbp", currencies)
        assert conversion.to_currency == "GBP"

    def test_unknown_currency(self, currencies):
        with pytest.raises(CurrencyNotFoundError) as exc_info:
            CurrencyService().convert(10, "USD", "JPY", currencies)
        assert exc_info.value.details["currency_code"] == "JPY"

    def test_zero_source_rate_rejected(self):
        currencies = [Currency(code="USD", exchange_rate=0), Currency(code="EUR", exchange_rate=1)]
        with pytest.raises(CurrencyError):
            CurrencyService().convert(10, "USD", "EUR", currencies)


class TestExchangeRate:
    def test_same_currency(self):
        assert CurrencyService().get_exchange_rate("EUR", "eur", []) == 1.0

    def test_known_pair(self, currencies):
        assert CurrencyService().get_exchange_rate("EUR", "GBP", currencies) == pytest.approx(
            0.8 / 0.9
        )

    def test_unknown_pair(self, currencies):
        assert CurrencyService().get_exchange_rate("USD", "JPY", currencies) is None


class TestFormatting:
    def test_major_units(self):
        assert CurrencyService.format_amount(1234.5, "USD") == "$1,234.50"
        assert CurrencyService.format_amount(10, "eur") == "€10.00"

    def test_available_currencies(self):
        available = CurrencyService.get_available_currencies()
        assert len(available) == 20
        assert available[0].code == "USD"
        zar = next(c for c in available if c.code == "ZAR")
        assert zar.name == "South African Rand"
        assert zar.symbol == "R"


class TestRefreshRates:
    async def test_updates_rates(self, currencies, rate_provider: AsyncMock):
        result = await CurrencyService(rate_provider).refresh_rates(currencies)

        rate_provider.fetch_rates.assert_awaited_once_with("USD")
        assert result.updated == 1
        assert result.errors == ["No exchange rate found for GBP"]
        by_code = {c.code: c for c in result.currencies}
        assert by_code["USD"].exchange_rate == 1.0
        assert by_code["EUR"].exchange_rate == 0.92
        assert by_code["EUR"].last_updated is not None
        assert by_code["GBP"].exchange_rate == 0.8

    async def test_input_not_mutated(self, currencies, rate_provider: AsyncMock):
        await CurrencyService(rate_provider).refresh_rates(currencies)
        assert currencies[1].exchange_rate == 0.9

    async def test_no_default_currency(self, rate_provider: AsyncMock):
        result = await CurrencyService(rate_provider).refresh_rates([Currency(code="EUR")])
        assert result.errors == ["No default currency set"]
        assert result.updated == 0
        rate_provider.fetch_rates.assert_not_awaited()

    async def test_provider_unavailable(self, currencies, rate_provider: AsyncMock):
        rate_provider.fetch_rates.side_effect = ExchangeRateUnavailableError("USD", "HTTP 503")
        result = await CurrencyService(rate_provider).refresh_rates(currencies)
        assert result.errors == ["Failed to fetch exchange rates"]
        assert result.currencies == currencies
