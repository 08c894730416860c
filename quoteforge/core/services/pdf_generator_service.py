"""
Quote document generation service.

Orchestrates profession layout selection, persistence-record transformation
and pre-render validation. Rendering itself is delegated to the strategies
returned by an injected ILayoutFactory.
"""

from collections.abc import Mapping
from typing import Any

from quoteforge.config import get_logger
from quoteforge.core.entities.quote import (
    PROFESSION_FIELDS,
    CompanySettings,
    LineItem,
    Profession,
    QuoteData,
    ValidationResult,
)
from quoteforge.core.interfaces import ILayoutFactory

logger = get_logger(__name__)

DEFAULT_CURRENCY = "USD"

_LINE_ITEM_EXTRA_FIELDS = tuple(
    dict.fromkeys(field for fields in PROFESSION_FIELDS.values() for field in fields)
)


class PdfGeneratorService:
    """
    Produces the HTML that an external converter turns into a quote PDF.

    Stateless apart from the layout factory; safe to share between callers.
    """

    def __init__(self, layout_factory: ILayoutFactory):
        self._layout_factory = layout_factory

    def generate_quote_html(self, quote_data: QuoteData) -> str:
        """
        Render quote data with the layout of its profession.

        If resolving or rendering the profession layout raises, the same
        data is rendered once more with the General layout. An exception
        from that second attempt is not caught.

        Args:
            quote_data: Normalized quote to render.

        Returns:
            Complete HTML document.
        """
        profession = quote_data.profession or self._layout_factory.get_default_profession()
        try:
            strategy = self._layout_factory.create(profession)
            html = strategy.generate_html(quote_data)
            logger.info(
                "quote_html_generated",
                quote_number=quote_data.quote_number,
                profession=strategy.get_profession_type(),
                size_chars=len(html),
            )
            return html

        except Exception as e:
            logger.error(
                "pdf_layout_failed",
                quote_number=quote_data.quote_number,
                profession=profession,
                error=str(e),
                error_type=type(e).__name__,
            )

        fallback = self._layout_factory.create(Profession.GENERAL.value)
        html = fallback.generate_html(quote_data)
        logger.info(
            "quote_html_generated_with_fallback",
            quote_number=quote_data.quote_number,
            requested_profession=profession,
        )
        return html

    def get_supported_professions(self) -> list[str]:
        return self._layout_factory.get_supported_professions()

    def is_profession_supported(self, profession: str | None) -> bool:
        return self._layout_factory.is_supported(profession)

    @staticmethod
    def transform_quote_data(
        db_quote: Mapping[str, Any],
        company_settings: Mapping[str, Any] | None,
    ) -> QuoteData:
        """
        Map a persistence-shaped quote record to QuoteData.

        Line items store their amount as line_total; profession fields
        present on the record are carried over.
        """
        line_items = [
            LineItem(
                id=item.get("id"),
                description=item.get("description"),
                quantity=item.get("quantity") or 0,
                unit_price=item.get("unit_price") or 0,
                total=_first_present(item, "line_total", "total"),
                **{
                    field: item[field]
                    for field in _LINE_ITEM_EXTRA_FIELDS
                    if item.get(field) is not None
                },
            )
            for item in (db_quote.get("line_items") or [])
        ]

        company = None
        if company_settings is not None:
            company = CompanySettings(
                company_name=company_settings.get("company_name") or "",
                company_address=company_settings.get("company_address"),
                company_phone=company_settings.get("company_phone"),
                company_email=company_settings.get("company_email"),
                company_logo=company_settings.get("company_logo"),
                tax_number=company_settings.get("tax_number"),
                registration_number=company_settings.get("registration_number"),
            )

        return QuoteData(
            id=db_quote.get("id"),
            quote_number=db_quote.get("quote_number"),
            client_name=db_quote.get("client_name"),
            client_email=db_quote.get("client_email"),
            client_address=db_quote.get("client_address"),
            client_phone=db_quote.get("client_phone"),
            issue_date=db_quote.get("issue_date"),
            due_date=db_quote.get("due_date"),
            status=db_quote.get("status"),
            subtotal=db_quote.get("subtotal") or 0,
            tax_amount=db_quote.get("tax_amount") or 0,
            total_amount=db_quote.get("total_amount") or 0,
            currency=db_quote.get("currency") or DEFAULT_CURRENCY,
            profession=db_quote.get("profession") or Profession.GENERAL.value,
            notes=db_quote.get("notes"),
            terms=db_quote.get("terms"),
            line_items=line_items,
            company_settings=company,
        )

    def validate_quote_data(self, quote_data: QuoteData) -> ValidationResult:
        """
        Check quote data before rendering.

        Every violation is collected; line items are numbered from 1.
        Arithmetic consistency of the totals is not checked.
        """
        errors: list[str] = []

        required = (
            (quote_data.quote_number, "Quote number is required"),
            (quote_data.client_name, "Client name is required"),
            (quote_data.client_email, "Client email is required"),
            (quote_data.issue_date, "Issue date is required"),
            (quote_data.due_date, "Due date is required"),
        )
        errors.extend(message for value, message in required if not value)

        if not quote_data.line_items:
            errors.append("At least one line item is required")

        for index, item in enumerate(quote_data.line_items, 1):
            if not item.description.strip():
                errors.append(f"Line item {index}: Description is required")
            if item.quantity <= 0:
                errors.append(f"Line item {index}: Quantity must be greater than 0")
            if item.unit_price < 0:
                errors.append(f"Line item {index}: Unit price cannot be negative")

        if quote_data.subtotal < 0:
            errors.append("Subtotal cannot be negative")
        if quote_data.tax_amount < 0:
            errors.append("Tax amount cannot be negative")
        if quote_data.total_amount < 0:
            errors.append("Total amount cannot be negative")

        if quote_data.profession and not self.is_profession_supported(quote_data.profession):
            errors.append(f"Unsupported profession: {quote_data.profession}")

        return ValidationResult(is_valid=not errors, errors=errors)


def _first_present(record: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        if record.get(key) is not None:
            return record[key]
    return 0
