"""Medical practice layout: patient information and treatment details."""

from typing import Any

from quoteforge.core.entities.quote import LineItem, Profession, QuoteData
from quoteforge.infrastructure.layouts.formatting import distinct_values
from quoteforge.infrastructure.layouts.general import GeneralLayoutStrategy, ItemField


class MedicalLayoutStrategy(GeneralLayoutStrategy):
    """Adds a patient block and per-item diagnosis/treatment fields."""

    profession = Profession.MEDICAL
    template_name = "medical.html"
    stylesheets = ("styles/general.css", "styles/medical.css")
    title_prefix = "Medical Quote"

    items_title = "Medical Services & Treatments"
    columns = ("Service Description", "Quantity", "Unit Price", "Total")
    fields_class = "medical-fields"

    def build_context(self, data: QuoteData) -> dict[str, Any]:
        context = super().build_context(data)
        context["patient_names"] = distinct_values(data.line_items, "patient_name")
        return context

    def item_fields(self, item: LineItem, data: QuoteData) -> list[ItemField]:
        fields = []
        if item.patient_name:
            fields.append(ItemField(None, "Patient", item.patient_name))
        if item.diagnosis_code:
            fields.append(ItemField("diagnosis-code", "Diagnosis Code", item.diagnosis_code))
        if item.treatment_type:
            fields.append(ItemField("treatment-type", "Treatment", item.treatment_type))
        return fields
