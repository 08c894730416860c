"""Application use cases."""

from quoteforge.application.use_cases.generate_quote_html import GenerateQuoteHtmlUseCase

__all__ = [
    "GenerateQuoteHtmlUseCase",
]
