"""Output format value object."""

from enum import StrEnum, auto


class OutputFormat(StrEnum):
    """Rendering used for the expiry report."""

    TEXT = auto()
    JSON = auto()

    def __str__(self) -> str:
        return self.value
