"""
General layout strategy.

Base document layout shared by every profession. Profession layouts extend
it by pointing at their own child template, appending a stylesheet and
contributing extra template context.
"""

from typing import Any, NamedTuple

from jinja2 import Environment

from quoteforge.core.entities.quote import LineItem, Profession, QuoteData
from quoteforge.core.interfaces import ILayoutStrategy
from quoteforge.infrastructure.layouts.environment import get_template_environment


class ItemField(NamedTuple):
    """One labelled profession field shown under a line item description."""

    css_class: str | None
    label: str
    value: str


class ItemRow(NamedTuple):
    """A line item paired with the profession fields it carries."""

    item: LineItem
    fields: list[ItemField]


class GeneralLayoutStrategy(ILayoutStrategy):
    """Renders the plain business quote layout."""

    profession: Profession = Profession.GENERAL
    template_name: str = "general.html"
    stylesheets: tuple[str, ...] = ("styles/general.css",)
    title_prefix: str = "Quote"

    # Line items table
    items_title: str = "Items"
    columns: tuple[str, str, str, str] = ("Description", "Quantity", "Unit Price", "Total")
    quantity_class: str = ""
    fields_class: str = ""

    def __init__(self, environment: Environment | None = None):
        self._env = environment or get_template_environment()

    def get_profession_type(self) -> str:
        return self.profession.value

    def get_styles(self) -> str:
        return "".join(self._env.get_template(name).render() for name in self.stylesheets)

    def generate_html(self, data: QuoteData) -> str:
        """Render the full document; any formatting error propagates to the caller."""
        template = self._env.get_template(self.template_name)
        return template.render(**self.build_context(data))

    def build_context(self, data: QuoteData) -> dict[str, Any]:
        """Template variables common to all layouts."""
        return {
            "title": f"{self.title_prefix} {data.quote_number}",
            "styles": self.get_styles(),
            "quote": data,
            "company": data.company_settings,
            "items_title": self.items_title,
            "columns": self.columns,
            "quantity_class": self.quantity_class,
            "fields_class": self.fields_class,
            "rows": [ItemRow(item, self.item_fields(item, data)) for item in data.line_items],
        }

    def item_fields(self, item: LineItem, data: QuoteData) -> list[ItemField]:
        """Profession fields present on one item, in display order."""
        return []
