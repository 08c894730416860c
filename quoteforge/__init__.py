"""quoteforge - profession-aware quote and invoice document generation."""

__version__ = "1.0.0"
