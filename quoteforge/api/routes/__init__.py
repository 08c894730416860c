"""API route modules."""

from quoteforge.api.routes.currencies import router as currencies_router
from quoteforge.api.routes.health import router as health_router
from quoteforge.api.routes.pdf import router as pdf_router

__all__ = [
    "health_router",
    "pdf_router",
    "currencies_router",
]
