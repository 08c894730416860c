"""Tests for HttpExchangeRateProvider."""

import httpx
import pytest

from quoteforge.core.entities.currency import Currency
from quoteforge.core.exceptions import ExchangeRateUnavailableError
from quoteforge.core.services.currency_service import CurrencyService
from quoteforge.infrastructure.rates import HttpExchangeRateProvider

PRIMARY = "https://primary.test/latest"
FALLBACK = "https://fallback.test/latest"

RATES_BODY = {"base": "USD", "date": "2024-01-01", "rates": {"eur": 0.9, "GBP": 0.8}}


def _provider(handler) -> HttpExchangeRateProvider:
    return HttpExchangeRateProvider(
        base_url=PRIMARY,
        fallback_url=FALLBACK,
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


class TestFetchRates:
    async def test_primary_success(self):
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=RATES_BODY)

        rates = await _provider(handler).fetch_rates("usd")

        assert rates.base == "USD"
        assert rates.date == "2024-01-01"
        assert rates.rates == {"EUR": 0.9, "GBP": 0.8}
        assert len(requests) == 1
        assert str(requests[0].url) == f"{PRIMARY}/USD"

    async def test_falls_back_on_primary_error(self):
        seen_hosts: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen_hosts.append(request.url.host)
            if request.url.host == "primary.test":
                return httpx.Response(503)
            assert request.url.params["base"] == "EUR"
            return httpx.Response(200, json={"base": "EUR", "rates": {"USD": 1.1}})

        rates = await _provider(handler).fetch_rates("EUR")

        assert seen_hosts == ["primary.test", "fallback.test"]
        assert rates.base == "EUR"
        assert rates.rates == {"USD": 1.1}
        assert rates.date is None

    async def test_both_endpoints_fail(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500)

        with pytest.raises(ExchangeRateUnavailableError) as exc_info:
            await _provider(handler).fetch_rates("USD")
        assert exc_info.value.details["reason"] == "HTTP 500"

    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ExchangeRateUnavailableError):
            await _provider(handler).fetch_rates("USD")

    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>not json</html>")

        with pytest.raises(ExchangeRateUnavailableError, match="Invalid JSON"):
            await _provider(handler).fetch_rates("USD")

    @pytest.mark.parametrize(
        "body",
        [
            {"base": "USD", "rates": {"EUR": None}},
            {"base": "USD", "rates": {"EUR": "n/a"}},
            {"base": "USD", "rates": ["EUR", 0.9]},
            [{"EUR": 0.9}],
        ],
    )
    async def test_malformed_rates_payload(self, body):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        with pytest.raises(ExchangeRateUnavailableError) as exc_info:
            await _provider(handler).fetch_rates("USD")
        assert exc_info.value.details["reason"] == "Invalid rates payload"


async def test_refresh_reports_malformed_payload_as_fetch_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"base": "USD", "rates": {"EUR": None}})

    currencies = [Currency(code="USD", is_default=True), Currency(code="EUR", exchange_rate=0.9)]

    result = await CurrencyService(_provider(handler)).refresh_rates(currencies)

    assert result.errors == ["Failed to fetch exchange rates"]
    assert result.updated == 0


def test_defaults_from_settings():
    provider = HttpExchangeRateProvider()
    assert provider.base_url == "https://api.exchangerate-api.com/v4/latest"
    assert provider.fallback_url == "https://api.fixer.io/latest"
    assert provider.timeout == 10.0
