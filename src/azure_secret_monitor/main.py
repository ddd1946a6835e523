#!/usr/bin/env python3
"""
Azure Secret Monitor

Composition root and command-line entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .application.exceptions import ApplicationError, ConfigurationError
from .application.ports import ApplicationRepository, ReportFormatter
from .application.use_cases import CheckExpiringSecrets
from .domain.entities import SecretReport
from .infrastructure.adapters import EntraIdApplicationRepository, create_formatter
from .infrastructure.config import Settings, load_settings

# Configure logging; stdout is reserved for the report
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stderr)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings

    def create_application_repository(self) -> ApplicationRepository:
        """Create the application repository adapter."""
        return EntraIdApplicationRepository(self._settings.graph_config)

    def create_report_formatter(self) -> ReportFormatter:
        """Create the formatter for the configured output format."""
        return create_formatter(self._settings.output_format)

    def create_check_use_case(self) -> CheckExpiringSecrets:
        """Create the main use case with all dependencies."""
        return CheckExpiringSecrets(
            application_repository=self.create_application_repository(),
            tag_pattern=self._settings.tag_pattern,
            threshold_days=self._settings.expiry_threshold_days,
        )


class Application:
    """Main application orchestrator: one check, one report on stdout."""

    def __init__(self, settings: Settings, container: ApplicationContainer | None = None) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = container or ApplicationContainer(settings)

    def check(self) -> SecretReport:
        """Execute a single secret expiry check."""
        use_case = self._container.create_check_use_case()
        return use_case.execute()

    def run(self) -> str:
        """
        Run the check and render its report.

        Returns:
            The rendered report.

        Raises:
            AuthenticationError: If the directory credentials are rejected.
            DirectoryQueryError: If listing applications fails.
        """
        report = self.check()
        return self._container.create_report_formatter().render(report)


@click.command(name="azure-secret-monitor")
@click.option("--config", "config_file", type=click.Path(dir_okay=False, path_type=Path), default=None,
              help="Config file (default is ./config.yaml).")
@click.option("--tenant-id", default=None, help="Azure AD tenant ID.")
@click.option("--client-id", default=None, help="Azure AD client ID.")
@click.option("--client-secret", default=None, help="Azure AD client secret.")
@click.option("--monitor-tag", default=None, help="Tag (regular expression) to monitor.  [default: MonitorSecrets]")
@click.option("--expiry-threshold-days", type=int, default=None,
              help="Number of days before expiration to report secrets.  [default: 30]")
@click.option("--format", "output_format", default=None, help="Output format (text/json).  [default: text]")
@click.option("--log-level", default=None, help="Log level for diagnostics on stderr.  [default: INFO]")
@click.version_option(__version__, "--version")
def cli(
    config_file: Path | None,
    tenant_id: str | None,
    client_id: str | None,
    client_secret: str | None,
    monitor_tag: str | None,
    expiry_threshold_days: int | None,
    output_format: str | None,
    log_level: str | None,
) -> None:
    """Monitor Azure AD application secrets for expiration.

    Lists application registrations carrying the monitor tag and reports
    password credentials expiring within the threshold, including those
    that already expired.
    """
    try:
        settings = load_settings(
            {
                "tenant_id": tenant_id,
                "client_id": client_id,
                "client_secret": client_secret,
                "monitor_tag": monitor_tag,
                "expiry_threshold_days": expiry_threshold_days,
                "format": output_format,
                "log_level": log_level,
            },
            config_file=config_file,
        )
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e

    logging.getLogger().setLevel(settings.log_level)
    logger.debug("Running with %r", settings)

    try:
        output = Application(settings).run()
    except ApplicationError as e:
        raise click.ClickException(f"failed to check secrets: {e}") from e

    click.echo(output, nl=False)


def main() -> None:
    """Main entry point."""
    try:
        cli.main(prog_name="azure-secret-monitor", standalone_mode=True)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
