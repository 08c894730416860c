"""Abstract interfaces for recurring invoice persistence and generation."""

from abc import ABC, abstractmethod
from datetime import date

from quoteforge.core.entities.recurring import RecurringInvoice


class IRecurringInvoiceStore(ABC):
    """Interface for recurring invoice schedule persistence."""

    @abstractmethod
    async def get_due(self, today: date) -> list[RecurringInvoice]:
        """Get active schedules whose next generation date is on or before today."""
        pass

    @abstractmethod
    async def update(self, schedule: RecurringInvoice) -> None:
        """Persist changes to a schedule."""
        pass


class IRecurringInvoiceGenerator(ABC):
    """Creates a concrete invoice from a recurring schedule's template."""

    @abstractmethod
    async def generate(self, schedule: RecurringInvoice) -> str | None:
        """Generate the next invoice; returns the new invoice ID or None on failure."""
        pass
