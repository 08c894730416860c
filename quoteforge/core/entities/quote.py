"""
Quote rendering entities.

QuoteData is the canonical input of the document generator. It is built
fresh for every render call and frozen for the duration of rendering.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Profession(str, Enum):
    """Profession category selecting the document layout."""

    GENERAL = "General"
    MEDICAL = "Medical"
    LEGAL = "Legal"
    ACCOUNTING = "Accounting"
    ENGINEERING = "Engineering"


# Optional line item fields carried per profession, in display order
PROFESSION_FIELDS: dict[Profession, tuple[str, ...]] = {
    Profession.GENERAL: (),
    Profession.MEDICAL: ("patient_name", "diagnosis_code", "treatment_type"),
    Profession.LEGAL: ("case_number", "legal_matter", "billing_rate", "court_reference"),
    Profession.ACCOUNTING: ("account_code", "tax_category"),
    Profession.ENGINEERING: (
        "project_phase",
        "engineering_discipline",
        "specification_reference",
    ),
}


class LineItem(BaseModel):
    """
    One billable row of a quote.

    Profession-specific fields are optional and absent (None) unless the
    item belongs to that profession. total is trusted as given.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    description: str = ""
    quantity: float = 0.0
    unit_price: float = 0.0
    total: float = 0.0

    # Medical
    patient_name: str | None = None
    diagnosis_code: str | None = None
    treatment_type: str | None = None

    # Legal
    case_number: str | None = None
    legal_matter: str | None = None
    billing_rate: float | None = None
    court_reference: str | None = None

    # Accounting
    account_code: str | None = None
    tax_category: str | None = None

    # Engineering
    project_phase: str | None = None
    engineering_discipline: str | None = None
    specification_reference: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)

    @field_validator("description", mode="before")
    @classmethod
    def coerce_description(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v)


class CompanySettings(BaseModel):
    """Issuer identity printed in the document header."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    company_name: str = ""
    company_address: str | None = None
    company_phone: str | None = None
    company_email: str | None = None
    company_logo: str | None = None
    tax_number: str | None = None
    registration_number: str | None = None


class QuoteData(BaseModel):
    """Normalized quote/invoice record consumed by the layout strategies."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = ""
    quote_number: str = ""
    client_name: str = ""
    client_email: str = ""
    client_address: str | None = None
    client_phone: str | None = None
    issue_date: str = ""
    due_date: str = ""
    status: str = ""
    subtotal: float = 0.0
    tax_amount: float = 0.0
    total_amount: float = 0.0
    currency: str = "USD"
    profession: str | None = None
    notes: str | None = None
    terms: str | None = None
    line_items: list[LineItem] = Field(default_factory=list)
    company_settings: CompanySettings | None = None

    @field_validator("id", "quote_number", "client_name", "client_email", "status", mode="before")
    @classmethod
    def coerce_string(cls, v: Any) -> str:
        """Ensure required text fields are never None."""
        if v is None:
            return ""
        return str(v)

    @field_validator("issue_date", "due_date", mode="before")
    @classmethod
    def coerce_date(cls, v: Any) -> str:
        """Keep dates as text; date objects are stored in ISO form."""
        if v is None:
            return ""
        if hasattr(v, "isoformat"):
            return v.isoformat()
        return str(v)


class ValidationResult(BaseModel):
    """Outcome of pre-render quote validation."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
