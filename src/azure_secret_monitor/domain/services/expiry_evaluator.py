"""Domain service for selecting secrets close to expiry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import datetime

from ..entities import ApplicationRegistration, ExpiringSecret
from ..value_objects import TagPattern


class ExpiryEvaluator:
    """Domain service that picks expiring secrets out of a directory snapshot."""

    def __init__(self, tag_pattern: TagPattern, threshold_days: int) -> None:
        """
        Initialize the evaluator.

        Args:
            tag_pattern: Pattern an application's tags must match to be monitored.
            threshold_days: Largest days-to-expiry still reported (inclusive).
        """
        self._tag_pattern = tag_pattern
        self._threshold_days = threshold_days

    @property
    def threshold_days(self) -> int:
        return self._threshold_days

    def is_monitored(self, application: ApplicationRegistration) -> bool:
        """Check if an application carries the monitor tag."""
        return self._tag_pattern.matches(application.tags)

    def evaluate(
        self,
        applications: Iterable[ApplicationRegistration],
        now: datetime,
    ) -> tuple[ExpiringSecret, ...]:
        """
        Evaluate all applications against the threshold.

        Results follow the listing order of ``applications`` and of each
        application's credentials.

        Args:
            applications: Registrations as returned by the directory.
            now: Evaluation instant.

        Returns:
            Secrets whose days-to-expiry is at or below the threshold.
        """
        return tuple(
            secret
            for application in applications
            if self.is_monitored(application)
            for secret in self._evaluate_application(application, now)
        )

    def _evaluate_application(
        self, application: ApplicationRegistration, now: datetime
    ) -> Iterator[ExpiringSecret]:
        for credential in application.password_credentials:
            days = credential.days_until_expiry(now)
            if days is None or days > self._threshold_days:
                continue

            # Partially populated records are skipped, not reported
            if credential.key_id is None or not application.is_identifiable:
                continue

            yield ExpiringSecret(
                application_name=application.display_name,  # type: ignore[arg-type]
                application_id=application.app_id,  # type: ignore[arg-type]
                secret_id=credential.key_id,
                expiry_date=credential.expiry_date,  # type: ignore[arg-type]
                days_to_expiry=days,
            )
