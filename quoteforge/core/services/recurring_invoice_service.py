"""
Recurring invoice scheduling.

Advances schedules, decides when they end and drives invoice generation
for schedules that are due. Persistence and invoice creation are injected.
"""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta

from quoteforge.config import get_logger
from quoteforge.core.entities.recurring import (
    Frequency,
    RecurringInvoice,
    RecurringProcessResult,
)
from quoteforge.core.interfaces import IRecurringInvoiceGenerator, IRecurringInvoiceStore

logger = get_logger(__name__)

# Singular label for interval 1, plural unit otherwise
_FREQUENCY_LABELS: dict[Frequency, tuple[str, str]] = {
    Frequency.DAILY: ("Daily", "days"),
    Frequency.WEEKLY: ("Weekly", "weeks"),
    Frequency.MONTHLY: ("Monthly", "months"),
    Frequency.QUARTERLY: ("Quarterly", "quarters"),
    Frequency.YEARLY: ("Yearly", "years"),
}


def calculate_next_date(
    current: date,
    frequency: Frequency | str,
    interval_count: int = 1,
) -> date:
    """
    Next generation date after current.

    Month arithmetic clamps to the end of the target month
    (Jan 31 + 1 month -> Feb 28/29). Unknown frequencies step monthly.
    """
    try:
        frequency = Frequency(frequency)
    except ValueError:
        frequency = Frequency.MONTHLY

    if frequency == Frequency.DAILY:
        step = relativedelta(days=interval_count)
    elif frequency == Frequency.WEEKLY:
        step = relativedelta(weeks=interval_count)
    elif frequency == Frequency.QUARTERLY:
        step = relativedelta(months=interval_count * 3)
    elif frequency == Frequency.YEARLY:
        step = relativedelta(years=interval_count)
    else:
        step = relativedelta(months=interval_count)

    return current + step


def get_frequency_text(frequency: Frequency | str, interval_count: int = 1) -> str:
    """Human-readable cadence, e.g. "Monthly" or "Every 3 months"."""
    try:
        single, unit = _FREQUENCY_LABELS[Frequency(frequency)]
    except ValueError:
        return "Unknown"

    if interval_count == 1:
        return single
    return f"Every {interval_count} {unit}"


class RecurringInvoiceService:
    """Processes due recurring invoice schedules."""

    def __init__(
        self,
        store: IRecurringInvoiceStore,
        generator: IRecurringInvoiceGenerator,
    ):
        self._store = store
        self._generator = generator

    calculate_next_date = staticmethod(calculate_next_date)
    get_frequency_text = staticmethod(get_frequency_text)

    async def process_due_invoices(self, today: date | None = None) -> RecurringProcessResult:
        """
        Generate invoices for every schedule due on or before today.

        Schedules past their end date or occurrence limit are deactivated
        instead. Per-schedule failures are collected in the result.
        """
        today = today or date.today()
        result = RecurringProcessResult()

        try:
            schedules = await self._store.get_due(today)
        except Exception as e:
            logger.error("recurring_due_lookup_failed", error=str(e))
            result.errors.append(f"Error processing due invoices: {e}")
            return result

        for schedule in schedules:
            if not schedule.is_due(today):
                continue

            try:
                await self._process_one(schedule, today, result)
            except Exception as e:
                logger.warning(
                    "recurring_invoice_failed",
                    recurring_id=schedule.id,
                    error=str(e),
                )
                result.errors.append(f"Error processing recurring invoice {schedule.id}: {e}")

        logger.info(
            "recurring_invoices_processed",
            due=len(schedules),
            generated=result.generated,
            deactivated=result.deactivated,
            errors=len(result.errors),
        )
        return result

    async def _process_one(
        self,
        schedule: RecurringInvoice,
        today: date,
        result: RecurringProcessResult,
    ) -> None:
        if schedule.occurrences_exhausted or schedule.has_ended(today):
            await self._store.update(schedule.model_copy(update={"is_active": False}))
            result.deactivated += 1
            logger.info("recurring_invoice_deactivated", recurring_id=schedule.id)
            return

        invoice_id = await self._generator.generate(schedule)
        if not invoice_id:
            result.errors.append(f"Failed to generate invoice for recurring invoice {schedule.id}")
            return

        next_date = calculate_next_date(
            schedule.next_generation_date,
            schedule.frequency,
            schedule.interval_count,
        )
        await self._store.update(
            schedule.model_copy(
                update={
                    "next_generation_date": next_date,
                    "generated_count": schedule.generated_count + 1,
                    "last_generated_at": datetime.now(),
                }
            )
        )
        result.generated += 1
        logger.debug(
            "recurring_invoice_generated",
            recurring_id=schedule.id,
            invoice_id=invoice_id,
            next_generation_date=next_date.isoformat(),
        )
