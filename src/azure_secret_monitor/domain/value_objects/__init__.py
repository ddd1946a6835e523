"""Domain value objects - Immutable objects defined by their attributes."""

from .output_format import OutputFormat
from .tag_pattern import TagPattern

__all__ = [
    "OutputFormat",
    "TagPattern",
]
