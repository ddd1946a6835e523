"""Application ports - Interfaces for external adapters."""

from .application_repository import ApplicationRepository
from .report_formatter import ReportFormatter

__all__ = [
    "ApplicationRepository",
    "ReportFormatter",
]
