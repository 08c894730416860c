"""Tests for recurring invoice, currency and permission entities."""

from datetime import date

import pytest
from pydantic import ValidationError

from quoteforge.core.entities.currency import Currency
from quoteforge.core.entities.permission import PermissionDefinition
from quoteforge.core.entities.recurring import Frequency, RecurringInvoice


def _schedule(**overrides) -> RecurringInvoice:
    data = {
        "id": "r-1",
        "frequency": Frequency.MONTHLY,
        "start_date": date(2024, 1, 1),
        "next_generation_date": date(2024, 2, 1),
    }
    data.update(overrides)
    return RecurringInvoice(**data)


class TestRecurringInvoice:
    def test_is_due_on_and_after_next_date(self):
        schedule = _schedule()
        assert schedule.is_due(date(2024, 2, 1))
        assert schedule.is_due(date(2024, 3, 1))
        assert not schedule.is_due(date(2024, 1, 31))

    def test_inactive_never_due(self):
        assert not _schedule(is_active=False).is_due(date(2024, 6, 1))

    def test_occurrences_exhausted(self):
        assert _schedule(max_occurrences=3, generated_count=3).occurrences_exhausted
        assert not _schedule(max_occurrences=3, generated_count=2).occurrences_exhausted
        assert not _schedule(max_occurrences=None, generated_count=99).occurrences_exhausted

    def test_has_ended_after_end_date(self):
        schedule = _schedule(end_date=date(2024, 2, 1))
        assert not schedule.has_ended(date(2024, 2, 1))
        assert schedule.has_ended(date(2024, 2, 2))
        assert not _schedule().has_ended(date(2099, 1, 1))

    def test_interval_must_be_positive(self):
        with pytest.raises(ValidationError):
            _schedule(interval_count=0)

    def test_frequency_from_string(self):
        assert _schedule(frequency="quarterly").frequency == Frequency.QUARTERLY


class TestCurrency:
    def test_code_normalized(self):
        assert Currency(code=" eur ").code == "EUR"

    def test_defaults(self):
        currency = Currency(code="USD")
        assert currency.exchange_rate == 1.0
        assert not currency.is_default


class TestPermissionDefinition:
    def test_resource_and_action(self):
        definition = PermissionDefinition("invoice:send", "Send Invoices", "Send", "Invoices")
        assert definition.resource == "invoice"
        assert definition.action == "send"
