"""Quote document endpoints."""

from fastapi import APIRouter, Depends

from quoteforge.api.dependencies import get_generate_quote_html_use_case, get_generator
from quoteforge.application.dto.requests import GenerateHtmlRequest, ValidateQuoteRequest
from quoteforge.application.dto.responses import (
    ErrorResponse,
    GenerateHtmlResponse,
    ProfessionsResponse,
    ValidationResponse,
)
from quoteforge.application.use_cases import GenerateQuoteHtmlUseCase
from quoteforge.core.entities.quote import Profession
from quoteforge.core.exceptions import ValidationError
from quoteforge.core.services import PdfGeneratorService

router = APIRouter(prefix="/api/pdf", tags=["pdf"])


@router.post(
    "/generate-html",
    response_model=GenerateHtmlResponse,
    responses={400: {"model": ErrorResponse}},
)
async def generate_html(
    request: GenerateHtmlRequest,
    use_case: GenerateQuoteHtmlUseCase = Depends(get_generate_quote_html_use_case),
) -> GenerateHtmlResponse:
    """Render a quote into the HTML document used for PDF conversion."""
    if not request.profession or not request.quote_data:
        raise ValidationError(
            field="profession" if not request.profession else "quote_data",
            message="Missing required fields: profession and quote_data",
        )

    html = use_case.execute(request.profession, request.quote_data)
    return GenerateHtmlResponse(success=True, html=html)


@router.post(
    "/validate",
    response_model=ValidationResponse,
    responses={400: {"model": ErrorResponse}},
)
async def validate_quote(
    request: ValidateQuoteRequest,
    use_case: GenerateQuoteHtmlUseCase = Depends(get_generate_quote_html_use_case),
) -> ValidationResponse:
    """Check quote data without rendering it."""
    result = use_case.validate(request.quote_data)
    return ValidationResponse(is_valid=result.is_valid, errors=result.errors)


@router.get("/professions", response_model=ProfessionsResponse)
async def list_professions(
    generator: PdfGeneratorService = Depends(get_generator),
) -> ProfessionsResponse:
    """List supported document layouts."""
    professions = generator.get_supported_professions()
    return ProfessionsResponse(professions=professions, default=Profession.GENERAL.value)
