"""
Layout factory.

Maps a profession string to its layout strategy. Resolution is total:
unknown or empty professions fall back to the General layout.
"""

from jinja2 import Environment

from quoteforge.config import get_logger
from quoteforge.core.entities.quote import Profession
from quoteforge.core.interfaces import ILayoutFactory, ILayoutStrategy
from quoteforge.infrastructure.layouts.accounting import AccountingLayoutStrategy
from quoteforge.infrastructure.layouts.engineering import EngineeringLayoutStrategy
from quoteforge.infrastructure.layouts.general import GeneralLayoutStrategy
from quoteforge.infrastructure.layouts.legal import LegalLayoutStrategy
from quoteforge.infrastructure.layouts.medical import MedicalLayoutStrategy

logger = get_logger(__name__)

LAYOUT_STRATEGIES: dict[Profession, type[GeneralLayoutStrategy]] = {
    Profession.GENERAL: GeneralLayoutStrategy,
    Profession.MEDICAL: MedicalLayoutStrategy,
    Profession.LEGAL: LegalLayoutStrategy,
    Profession.ACCOUNTING: AccountingLayoutStrategy,
    Profession.ENGINEERING: EngineeringLayoutStrategy,
}

_BY_KEY: dict[str, Profession] = {p.value.lower(): p for p in Profession}


def _normalize(profession_type: str | None) -> str:
    return (profession_type or "").strip().lower()


class PdfLayoutFactory(ILayoutFactory):
    """Creates profession layout strategies."""

    def __init__(self, environment: Environment | None = None):
        self._environment = environment

    def create(self, profession_type: str | None) -> ILayoutStrategy:
        """
        Get the layout strategy for a profession.

        Args:
            profession_type: Profession name in any letter case, surrounding
                whitespace allowed.

        Returns:
            Matching strategy, or the General strategy for unknown input.
        """
        profession = _BY_KEY.get(_normalize(profession_type))
        if profession is None:
            if profession_type:
                logger.debug("unknown_profession_defaulted", profession=profession_type)
            profession = Profession.GENERAL
        return LAYOUT_STRATEGIES[profession](self._environment)

    def get_supported_professions(self) -> list[str]:
        return [p.value for p in Profession]

    def is_supported(self, profession_type: str | None) -> bool:
        return _normalize(profession_type) in _BY_KEY

    def get_default_profession(self) -> str:
        return Profession.GENERAL.value


_factory: PdfLayoutFactory | None = None


def get_layout_factory() -> PdfLayoutFactory:
    """Get or create the shared layout factory."""
    global _factory
    if _factory is None:
        _factory = PdfLayoutFactory()
    return _factory
