"""Structured (JSON) report formatter."""

from __future__ import annotations

from ....domain.entities import ExpiringSecret, SecretReport
from ....domain.value_objects import OutputFormat
from .models import ConfigInfo, ExecutionInfo, OutputResult, SecretInfo


def _secret_to_model(secret: ExpiringSecret) -> SecretInfo:
    return SecretInfo(
        application_name=secret.application_name,
        application_id=secret.application_id,
        secret_id=secret.secret_id,
        expiry_date=secret.expiry_date.isoformat(),
        days_to_expiry=secret.days_to_expiry,
    )


class JsonReportFormatter:
    """Renders a report as a pretty-printed JSON document."""

    INDENT = 2

    def build(self, report: SecretReport) -> OutputResult:
        """Convert a domain report into its JSON model."""
        return OutputResult(
            results=[_secret_to_model(s) for s in report],
            execution_info=ExecutionInfo(
                timestamp=report.timestamp,
                config=ConfigInfo(
                    expiry_threshold_days=report.expiry_threshold_days,
                    monitor_tag=report.monitor_tag,
                    format=OutputFormat.JSON.value,
                ),
            ),
        )

    def render(self, report: SecretReport) -> str:
        """Render the report as JSON followed by a newline."""
        return self.build(report).model_dump_json(indent=self.INDENT) + "\n"
