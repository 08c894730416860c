"""Legal services layout: case information and time entries."""

from typing import Any

from quoteforge.core.entities.quote import LineItem, Profession, QuoteData
from quoteforge.infrastructure.layouts.formatting import distinct_values, format_currency
from quoteforge.infrastructure.layouts.general import GeneralLayoutStrategy, ItemField


class LegalLayoutStrategy(GeneralLayoutStrategy):
    """Adds a case block and bills quantities as hours/units."""

    profession = Profession.LEGAL
    template_name = "legal.html"
    stylesheets = ("styles/general.css", "styles/legal.css")
    title_prefix = "Legal Services Quote"

    items_title = "Legal Services & Time Entries"
    columns = ("Service Description", "Hours/Units", "Rate", "Total")
    quantity_class = "time-entries"
    fields_class = "legal-fields"

    def build_context(self, data: QuoteData) -> dict[str, Any]:
        context = super().build_context(data)
        context.update(
            case_numbers=distinct_values(data.line_items, "case_number"),
            legal_matters=distinct_values(data.line_items, "legal_matter"),
            court_references=distinct_values(data.line_items, "court_reference"),
        )
        return context

    def item_fields(self, item: LineItem, data: QuoteData) -> list[ItemField]:
        fields = []
        if item.case_number:
            fields.append(ItemField("case-number", "Case", item.case_number))
        if item.legal_matter:
            fields.append(ItemField("legal-matter", "Matter", item.legal_matter))
        if item.billing_rate:
            rate = format_currency(item.billing_rate, data.currency)
            fields.append(ItemField("billing-rate", "Rate", f"{rate}/hr"))
        if item.court_reference:
            fields.append(ItemField("court-reference", "Court", item.court_reference))
        return fields
