"""fitplan: AI-generated weekly diet and workout plans."""

__version__ = "0.1.0"
