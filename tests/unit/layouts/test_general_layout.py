"""Tests for the General layout document structure."""

from quoteforge.core.entities.quote import CompanySettings, LineItem, QuoteData
from quoteforge.infrastructure.layouts import GeneralLayoutStrategy


class TestDocumentShell:
    def test_complete_self_contained_document(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)

        assert html.startswith("<!DOCTYPE html>")
        assert "<style>" in html
        assert "</html>" in html
        assert "<title>Quote Q-2002</title>" in html
        assert "<link" not in html
        assert "<script" not in html

    def test_styles_inlined(self, general_quote: QuoteData):
        strategy = GeneralLayoutStrategy()
        html = strategy.generate_html(general_quote)
        assert strategy.get_styles().strip()
        assert strategy.get_styles() in html

    def test_deterministic(self, general_quote: QuoteData):
        strategy = GeneralLayoutStrategy()
        assert strategy.generate_html(general_quote) == strategy.generate_html(general_quote)


class TestSections:
    def test_header_omitted_without_company(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        assert "QUOTE #" not in html
        assert 'class="header"' not in html

    def test_header_with_company(self, general_quote: QuoteData, company: CompanySettings):
        quote = general_quote.model_copy(update={"company_settings": company})
        html = GeneralLayoutStrategy().generate_html(quote)

        assert "QUOTE #Q-2002" in html
        assert "Acme Professional Services" in html
        assert "Phone: 555-0100" in html
        assert "Email: billing@acme.test" in html
        assert "Tax Number: TX-998877" in html

    def test_bill_to_optional_fields(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        assert "Bill To:" in html
        assert "<strong>Bob Buyer</strong>" in html
        assert "bob@example.com" in html

        quote = general_quote.model_copy(update={"client_phone": "555-0199"})
        assert "555-0199" in GeneralLayoutStrategy().generate_html(quote)

    def test_quote_details(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        assert "<strong>Issue Date:</strong> 3/5/2024" in html
        assert "<strong>Due Date:</strong> 4/4/2024" in html
        assert "<strong>Status:</strong> sent" in html
        assert "<strong>Currency:</strong> USD" in html

    def test_line_items_table(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        for column in ("Description", "Quantity", "Unit Price", "Total"):
            assert f">{column}</th>" in html
        assert "Widget" in html
        assert ">5</td>" in html
        assert "$50.00" in html
        assert "$250.00" in html

    def test_totals(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        assert "Subtotal:" in html
        assert "$0.00" in html
        assert "Total:" in html

    def test_notes_and_terms_only_when_present(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        assert 'class="notes"' not in html
        assert 'class="terms"' not in html

        quote = general_quote.model_copy(
            update={"notes": "Thank you for your business", "terms": "Net 30"}
        )
        html = GeneralLayoutStrategy().generate_html(quote)
        assert "Thank you for your business" in html
        assert "Terms &amp; Conditions" in html
        assert "Net 30" in html

    def test_no_banner_or_disclaimer(self, general_quote: QuoteData):
        html = GeneralLayoutStrategy().generate_html(general_quote)
        assert "Disclaimer:</strong>" not in html
        assert "<h3" not in html

    def test_user_text_is_escaped(self, general_quote: QuoteData):
        quote = general_quote.model_copy(
            update={
                "client_name": "<script>alert(1)</script>",
                "line_items": [LineItem(description="A & B", quantity=1, unit_price=1, total=1)],
            }
        )
        html = GeneralLayoutStrategy().generate_html(quote)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
        assert "A &amp; B" in html

    def test_empty_currency_formats_as_usd(self, general_quote: QuoteData):
        quote = general_quote.model_copy(update={"currency": ""})
        assert "$250.00" in GeneralLayoutStrategy().generate_html(quote)

    def test_general_has_no_item_fields(self, general_quote: QuoteData):
        strategy = GeneralLayoutStrategy()
        item = LineItem(description="Tagged", case_number="CASE-9")
        assert strategy.item_fields(item, general_quote) == []
