"""Report formatters for standard output."""

from .factory import create_formatter
from .json_report import JsonReportFormatter
from .text_report import TextReportFormatter

__all__ = [
    "JsonReportFormatter",
    "TextReportFormatter",
    "create_formatter",
]
