"""Infrastructure adapters - Implementations of application ports."""

from .entra_id import EntraIdApplicationRepository
from .reporting import JsonReportFormatter, TextReportFormatter, create_formatter

__all__ = [
    "EntraIdApplicationRepository",
    "JsonReportFormatter",
    "TextReportFormatter",
    "create_formatter",
]
