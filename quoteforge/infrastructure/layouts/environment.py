"""
Jinja2 environment for document layouts.

Templates and stylesheets ship inside the package; the environment is built
once and shared read-only between render calls.
"""

from functools import lru_cache

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from quoteforge.infrastructure.layouts.formatting import (
    format_currency,
    format_date,
    format_quantity,
)


@lru_cache
def get_template_environment() -> Environment:
    """Get the shared template environment with formatting filters registered."""
    env = Environment(
        loader=PackageLoader("quoteforge.infrastructure.layouts", "templates"),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["currency"] = format_currency
    env.filters["date"] = format_date
    env.filters["quantity"] = format_quantity
    return env
