"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between API and use cases.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerateHtmlRequest(BaseModel):
    """Request for quote HTML generation.

    Both fields are optional at the schema level so that a missing field is
    reported as a bad request rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    profession: str | None = Field(
        default=None,
        description="Profession selecting the document layout",
        examples=["Legal", "medical"],
    )
    quote_data: dict[str, Any] | None = Field(
        default=None,
        alias="quoteData",
        description="Quote record to render (QuoteData shape)",
    )


class ValidateQuoteRequest(BaseModel):
    """Request for quote data validation without rendering."""

    model_config = ConfigDict(populate_by_name=True)

    quote_data: dict[str, Any] = Field(
        ...,
        alias="quoteData",
        description="Quote record to validate",
    )


class CurrencyRequest(BaseModel):
    """A caller-supplied currency with its rate against the base currency."""

    code: str = Field(..., min_length=3, max_length=3, examples=["EUR"])
    exchange_rate: float = Field(default=1.0, gt=0, description="Rate against base currency")
    is_default: bool = Field(default=False)


class ConvertCurrencyRequest(BaseModel):
    """Request for currency conversion."""

    amount: float = Field(..., description="Amount in major units of from_currency")
    from_currency: str = Field(..., min_length=3, max_length=3, examples=["USD"])
    to_currency: str = Field(..., min_length=3, max_length=3, examples=["EUR"])
    currencies: list[CurrencyRequest] = Field(
        ...,
        min_length=1,
        description="Currencies and rates available for the conversion",
    )
