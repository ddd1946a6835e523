"""Formatter selection by output format."""

from ....application.ports import ReportFormatter
from ....domain.value_objects import OutputFormat
from .json_report import JsonReportFormatter
from .text_report import TextReportFormatter


def create_formatter(output_format: OutputFormat) -> ReportFormatter:
    """Return the formatter for the requested output format."""
    match output_format:
        case OutputFormat.JSON:
            return JsonReportFormatter()
        case OutputFormat.TEXT:
            return TextReportFormatter()
