"""Tests for quote entities."""

from datetime import date

import pytest
from pydantic import ValidationError

from quoteforge.core.entities.quote import (
    PROFESSION_FIELDS,
    CompanySettings,
    LineItem,
    Profession,
    QuoteData,
)


class TestLineItem:
    def test_defaults(self):
        item = LineItem()
        assert item.id == ""
        assert item.description == ""
        assert item.quantity == 0.0
        assert item.billing_rate is None

    def test_numeric_id_coerced_to_string(self):
        item = LineItem(id=42, description="Audit", quantity=1, unit_price=10, total=10)
        assert item.id == "42"

    def test_none_description_becomes_empty(self):
        assert LineItem(description=None).description == ""

    def test_unknown_fields_ignored(self):
        item = LineItem(description="X", line_total=99)
        assert not hasattr(item, "line_total")

    def test_frozen(self):
        item = LineItem(description="X")
        with pytest.raises(ValidationError):
            item.description = "Y"


class TestQuoteData:
    def test_defaults(self):
        quote = QuoteData()
        assert quote.currency == "USD"
        assert quote.profession is None
        assert quote.line_items == []
        assert quote.company_settings is None

    def test_none_text_fields_become_empty(self):
        quote = QuoteData(quote_number=None, client_name=None, status=None)
        assert quote.quote_number == ""
        assert quote.client_name == ""
        assert quote.status == ""

    def test_date_objects_stored_as_iso(self):
        quote = QuoteData(issue_date=date(2024, 1, 2), due_date=None)
        assert quote.issue_date == "2024-01-02"
        assert quote.due_date == ""

    def test_nested_models_from_dicts(self):
        quote = QuoteData.model_validate(
            {
                "quote_number": "Q-1",
                "line_items": [{"description": "Work", "quantity": 2, "unit_price": 5, "total": 10}],
                "company_settings": {"company_name": "Acme"},
            }
        )
        assert isinstance(quote.line_items[0], LineItem)
        assert quote.line_items[0].total == 10
        assert isinstance(quote.company_settings, CompanySettings)
        assert quote.company_settings.company_name == "Acme"

    def test_totals_not_reconciled(self):
        quote = QuoteData(subtotal=100, tax_amount=10, total_amount=5)
        assert quote.total_amount == 5


class TestProfession:
    def test_values(self):
        assert [p.value for p in Profession] == [
            "General",
            "Medical",
            "Legal",
            "Accounting",
            "Engineering",
        ]

    def test_every_profession_has_field_list(self):
        assert set(PROFESSION_FIELDS) == set(Profession)
        assert PROFESSION_FIELDS[Profession.GENERAL] == ()

    def test_profession_fields_exist_on_line_item(self):
        for fields in PROFESSION_FIELDS.values():
            for field in fields:
                assert field in LineItem.model_fields
