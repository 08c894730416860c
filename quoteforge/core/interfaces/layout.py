"""Abstract interfaces for profession-specific document layouts."""

from abc import ABC, abstractmethod

from quoteforge.core.entities.quote import QuoteData


class ILayoutStrategy(ABC):
    """Renders a complete, self-contained HTML document for one profession."""

    @abstractmethod
    def generate_html(self, data: QuoteData) -> str:
        """Render quote data into an HTML document ready for PDF conversion."""
        pass

    @abstractmethod
    def get_styles(self) -> str:
        """Get the CSS inlined into the document head."""
        pass

    @abstractmethod
    def get_profession_type(self) -> str:
        """Get the canonical profession name this layout handles."""
        pass


class ILayoutFactory(ABC):
    """Resolves a profession string to a layout strategy."""

    @abstractmethod
    def create(self, profession_type: str | None) -> ILayoutStrategy:
        """Get the layout for a profession; unknown values resolve to the default."""
        pass

    @abstractmethod
    def get_supported_professions(self) -> list[str]:
        """Get canonical names of all supported professions."""
        pass

    @abstractmethod
    def is_supported(self, profession_type: str | None) -> bool:
        """Case-insensitive membership test."""
        pass

    @abstractmethod
    def get_default_profession(self) -> str:
        """Get the profession used when none is given."""
        pass
