"""Human-readable report formatter."""

from __future__ import annotations

from ....domain.entities import ExpiringSecret, SecretReport

SEPARATOR = "-" * 50


class TextReportFormatter:
    """Renders a report as labelled plain-text blocks."""

    TITLE = "Azure Secret Monitor Report"

    def render(self, report: SecretReport) -> str:
        """Render the header followed by one block per expiring secret."""
        lines = [
            self.TITLE,
            f"Generated at: {report.timestamp}",
            "Configuration:",
            f"  - Expiry Threshold: {report.expiry_threshold_days} days",
            f"  - Monitor Tag: {report.monitor_tag}",
            "",
        ]

        if not report.secrets:
            lines.append("No expiring secrets found.")
        else:
            lines.append(f"Found {len(report)} expiring secrets:")
            lines.append("")
            for secret in report:
                lines.extend(self._format_secret(secret))

        return "\n".join(lines) + "\n"

    @staticmethod
    def _format_secret(secret: ExpiringSecret) -> list[str]:
        return [
            f"Application: {secret.application_name}",
            f"App ID: {secret.application_id}",
            f"Secret ID: {secret.secret_id}",
            f"Expiry Date: {secret.expiry_date.isoformat()}",
            f"Days Until Expiry: {secret.days_to_expiry}",
            SEPARATOR,
        ]
