"""Interactive profile questionnaire."""

from .client import ManualInputClient, parse_number

__all__ = ["ManualInputClient", "parse_number"]
