"""Currency endpoints."""

from fastapi import APIRouter, Depends

from quoteforge.api.dependencies import get_currency
from quoteforge.application.dto.requests import ConvertCurrencyRequest
from quoteforge.application.dto.responses import ConversionResponse, ErrorResponse
from quoteforge.core.entities.currency import Currency
from quoteforge.core.services import CurrencyService

router = APIRouter(prefix="/api/currencies", tags=["currencies"])


@router.get("")
async def list_available_currencies(
    service: CurrencyService = Depends(get_currency),
) -> list[dict[str, str]]:
    """List currencies that can be added to an account."""
    return [
        {"code": c.code, "name": c.name, "symbol": c.symbol}
        for c in service.get_available_currencies()
    ]


@router.post(
    "/convert",
    response_model=ConversionResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def convert_currency(
    request: ConvertCurrencyRequest,
    service: CurrencyService = Depends(get_currency),
) -> ConversionResponse:
    """Convert an amount using the supplied rates."""
    currencies = [
        Currency(code=c.code, exchange_rate=c.exchange_rate, is_default=c.is_default)
        for c in request.currencies
    ]
    conversion = service.convert(
        request.amount,
        request.from_currency,
        request.to_currency,
        currencies,
    )
    return ConversionResponse(
        from_currency=conversion.from_currency,
        to_currency=conversion.to_currency,
        amount=conversion.amount,
        converted_amount=conversion.converted_amount,
        rate=conversion.rate,
        formatted=service.format_amount(conversion.converted_amount, conversion.to_currency),
        timestamp=conversion.timestamp,
    )
