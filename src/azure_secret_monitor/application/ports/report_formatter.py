"""Port for report rendering - driven/secondary port."""

from typing import Protocol

from ...domain.entities import SecretReport


class ReportFormatter(Protocol):
    """Port for turning a secret report into output text."""

    def render(self, report: SecretReport) -> str:
        """
        Render the report.

        Args:
            report: The report to render.

        Returns:
            The complete rendering, ending with a newline.
        """
        ...
