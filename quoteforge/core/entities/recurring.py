"""
Recurring invoice schedule entities.
"""

from datetime import date, datetime
from enum import Enum

from pydantic import BaseModel, Field


class Frequency(str, Enum):
    """Billing cadence of a recurring invoice."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class RecurringInvoice(BaseModel):
    """A schedule that periodically generates invoices from a template invoice."""

    id: str
    customer_id: str = ""
    template_invoice_id: str = ""
    frequency: Frequency = Frequency.MONTHLY
    interval_count: int = Field(default=1, ge=1)
    start_date: date
    end_date: date | None = None
    max_occurrences: int | None = None
    is_active: bool = True
    next_generation_date: date
    generated_count: int = 0
    last_generated_at: datetime | None = None

    def is_due(self, today: date) -> bool:
        """Active and scheduled on or before today."""
        return self.is_active and self.next_generation_date <= today

    @property
    def occurrences_exhausted(self) -> bool:
        return bool(self.max_occurrences) and self.generated_count >= self.max_occurrences

    def has_ended(self, today: date) -> bool:
        return self.end_date is not None and today > self.end_date


class RecurringProcessResult(BaseModel):
    """Summary of one due-processing run."""

    generated: int = 0
    deactivated: int = 0
    errors: list[str] = Field(default_factory=list)
