"""Accounting services layout: account codes, tax categories and tax breakdown."""

from typing import Any

from quoteforge.core.entities.quote import LineItem, Profession, QuoteData
from quoteforge.infrastructure.layouts.formatting import (
    distinct_values,
    format_percentage,
    parse_date,
)
from quoteforge.infrastructure.layouts.general import GeneralLayoutStrategy, ItemField


class AccountingLayoutStrategy(GeneralLayoutStrategy):
    """Adds an account block and a financial summary with the effective tax rate."""

    profession = Profession.ACCOUNTING
    template_name = "accounting.html"
    stylesheets = ("styles/general.css", "styles/accounting.css")
    title_prefix = "Accounting Services Quote"

    items_title = "Accounting Services & Transactions"
    columns = ("Service Description", "Quantity", "Rate", "Amount")
    quantity_class = "chart-of-accounts"
    fields_class = "accounting-fields"

    def build_context(self, data: QuoteData) -> dict[str, Any]:
        context = super().build_context(data)
        account_codes = distinct_values(data.line_items, "account_code")
        tax_categories = distinct_values(data.line_items, "tax_category")
        context.update(
            account_codes=account_codes,
            tax_categories=tax_categories,
            financial_period=(
                parse_date(data.issue_date).year if account_codes or tax_categories else None
            ),
            tax_rate=format_percentage(data.tax_amount, data.subtotal),
        )
        return context

    def item_fields(self, item: LineItem, data: QuoteData) -> list[ItemField]:
        fields = []
        if item.account_code:
            fields.append(ItemField("account-code", "Account", item.account_code))
        if item.tax_category:
            fields.append(ItemField("tax-category", "Tax Category", item.tax_category))
        return fields
