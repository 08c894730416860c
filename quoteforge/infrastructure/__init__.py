"""Infrastructure layer implementations."""

from quoteforge.infrastructure import layouts, rates

__all__ = ["layouts", "rates"]
