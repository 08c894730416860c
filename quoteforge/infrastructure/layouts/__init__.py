"""Profession-specific HTML document layouts."""

from quoteforge.infrastructure.layouts.accounting import AccountingLayoutStrategy
from quoteforge.infrastructure.layouts.engineering import EngineeringLayoutStrategy
from quoteforge.infrastructure.layouts.factory import PdfLayoutFactory, get_layout_factory
from quoteforge.infrastructure.layouts.general import GeneralLayoutStrategy
from quoteforge.infrastructure.layouts.legal import LegalLayoutStrategy
from quoteforge.infrastructure.layouts.medical import MedicalLayoutStrategy

__all__ = [
    "GeneralLayoutStrategy",
    "MedicalLayoutStrategy",
    "LegalLayoutStrategy",
    "AccountingLayoutStrategy",
    "EngineeringLayoutStrategy",
    "PdfLayoutFactory",
    "get_layout_factory",
]
