"""Use case for checking and reporting expiring application secrets."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from ...domain.entities import SecretReport
from ...domain.services import ExpiryEvaluator
from ...domain.value_objects import TagPattern
from ..ports import ApplicationRepository

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


class CheckExpiringSecrets:
    """
    Use case for finding monitored application secrets close to expiry.

    Runs one fetch, evaluate and report pass. Fetch failures propagate
    unchanged; there is no retry and no partial report.
    """

    def __init__(
        self,
        application_repository: ApplicationRepository,
        tag_pattern: TagPattern,
        threshold_days: int,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize the use case.

        Args:
            application_repository: Adapter for listing application registrations.
            tag_pattern: Monitor tag selecting the applications to check.
            threshold_days: Largest days-to-expiry that is reported.
            clock: Source of the evaluation instant.
        """
        self._repository = application_repository
        self._tag_pattern = tag_pattern
        self._evaluator = ExpiryEvaluator(tag_pattern, threshold_days)
        self._clock = clock

    def execute(self) -> SecretReport:
        """
        Execute the secret expiry check.

        Returns:
            SecretReport with the secrets at or below the threshold.
        """
        now = self._clock()
        logger.info(
            "Checking secrets of applications tagged %r expiring within %d days",
            self._tag_pattern.pattern,
            self._evaluator.threshold_days,
        )

        applications = self._repository.list_applications()
        monitored = sum(1 for app in applications if self._evaluator.is_monitored(app))
        logger.info("Retrieved %d applications, %d monitored", len(applications), monitored)

        secrets = self._evaluator.evaluate(applications, now)
        report = SecretReport(
            secrets=secrets,
            monitor_tag=self._tag_pattern.pattern,
            expiry_threshold_days=self._evaluator.threshold_days,
            generated_at=now,
        )
        logger.info("Check complete: %s", report.get_summary())
        return report
