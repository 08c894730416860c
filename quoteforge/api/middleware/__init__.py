"""API middleware."""

from quoteforge.api.middleware.error_handler import ErrorHandlerMiddleware
from quoteforge.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
