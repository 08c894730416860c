"""
Generate Quote HTML Use Case.

Validates a quote and renders it into the HTML document that is handed to
the external PDF converter.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from quoteforge.config import get_logger
from quoteforge.core.entities.quote import QuoteData, ValidationResult
from quoteforge.core.exceptions import QuoteValidationError, ValidationError
from quoteforge.core.services.pdf_generator_service import PdfGeneratorService

logger = get_logger(__name__)


class GenerateQuoteHtmlUseCase:
    """
    Use case for rendering quote documents.

    Flow:
    1. Build QuoteData from the request payload or a stored record
    2. Validate it, rejecting invalid quotes with the full error list
    3. Render via PdfGeneratorService
    """

    def __init__(
        self,
        generator: PdfGeneratorService | None = None,
    ):
        self._generator = generator

    def _get_generator(self) -> PdfGeneratorService:
        if self._generator is None:
            from quoteforge.application.services import get_pdf_generator_service

            self._generator = get_pdf_generator_service()
        return self._generator

    @staticmethod
    def build_quote(
        quote_data: Mapping[str, Any] | QuoteData,
        profession: str | None = None,
    ) -> QuoteData:
        """
        Parse a payload into QuoteData, applying a profession override.

        Raises:
            ValidationError: If the payload does not fit the QuoteData shape.
        """
        if isinstance(quote_data, QuoteData):
            quote = quote_data
        else:
            try:
                quote = QuoteData.model_validate(dict(quote_data))
            except PydanticValidationError as e:
                raise ValidationError("quote_data", str(e)) from e

        if profession:
            quote = quote.model_copy(update={"profession": profession.strip()})
        return quote

    def validate(
        self,
        quote_data: Mapping[str, Any] | QuoteData,
        profession: str | None = None,
    ) -> ValidationResult:
        quote = self.build_quote(quote_data, profession)
        return self._get_generator().validate_quote_data(quote)

    def execute(
        self,
        profession: str | None,
        quote_data: Mapping[str, Any] | QuoteData,
    ) -> str:
        """
        Validate and render a quote.

        Args:
            profession: Layout to use; overrides the quote's own profession.
            quote_data: Quote payload or QuoteData.

        Returns:
            HTML document.

        Raises:
            QuoteValidationError: If validation reports any error.
        """
        generator = self._get_generator()
        quote = self.build_quote(quote_data, profession)

        logger.info(
            "generate_quote_html_started",
            quote_number=quote.quote_number,
            profession=quote.profession,
            line_items=len(quote.line_items),
        )

        result = generator.validate_quote_data(quote)
        if not result.is_valid:
            logger.warning(
                "quote_validation_failed",
                quote_number=quote.quote_number,
                errors=result.errors,
            )
            raise QuoteValidationError(quote.quote_number or None, result.errors)

        html = generator.generate_quote_html(quote)
        logger.info(
            "generate_quote_html_complete",
            quote_number=quote.quote_number,
            size_chars=len(html),
        )
        return html

    def execute_from_record(
        self,
        db_quote: Mapping[str, Any],
        company_settings: Mapping[str, Any] | None = None,
    ) -> str:
        """Render a stored quote record together with the issuer's settings."""
        quote = self._get_generator().transform_quote_data(db_quote, company_settings)
        return self.execute(quote.profession, quote)
