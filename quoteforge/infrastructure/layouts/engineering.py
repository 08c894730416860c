"""Engineering services layout: project information and phase breakdown."""

from typing import Any, NamedTuple

from quoteforge.core.entities.quote import LineItem, Profession, QuoteData
from quoteforge.infrastructure.layouts.formatting import distinct_values
from quoteforge.infrastructure.layouts.general import GeneralLayoutStrategy, ItemField

DEFAULT_PHASE = "General"


class PhaseSummary(NamedTuple):
    name: str
    total: float
    item_count: int


def summarize_phases(items: list[LineItem]) -> list[PhaseSummary]:
    """Group items by project phase in first-seen order; items without one go to "General"."""
    groups: dict[str, list[LineItem]] = {}
    for item in items:
        groups.setdefault(item.project_phase or DEFAULT_PHASE, []).append(item)
    return [
        PhaseSummary(name, sum(item.total for item in members), len(members))
        for name, members in groups.items()
    ]


class EngineeringLayoutStrategy(GeneralLayoutStrategy):
    """Adds a project block and a technical summary broken down by phase."""

    profession = Profession.ENGINEERING
    template_name = "engineering.html"
    stylesheets = ("styles/general.css", "styles/engineering.css")
    title_prefix = "Engineering Services Quote"

    items_title = "Engineering Services & Deliverables"
    columns = ("Service Description", "Quantity", "Rate", "Amount")
    fields_class = "engineering-fields"

    def build_context(self, data: QuoteData) -> dict[str, Any]:
        context = super().build_context(data)
        context.update(
            project_phases=distinct_values(data.line_items, "project_phase"),
            disciplines=distinct_values(data.line_items, "engineering_discipline"),
            specifications=distinct_values(data.line_items, "specification_reference"),
            phase_breakdown=summarize_phases(data.line_items),
        )
        return context

    def item_fields(self, item: LineItem, data: QuoteData) -> list[ItemField]:
        fields = []
        if item.project_phase:
            fields.append(ItemField("project-phase", "Phase", item.project_phase))
        if item.engineering_discipline:
            fields.append(
                ItemField("engineering-discipline", "Discipline", item.engineering_discipline)
            )
        if item.specification_reference:
            fields.append(ItemField("specification-ref", "Spec", item.specification_reference))
        return fields
