"""Secret report aggregate root."""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime

from .expiring_secret import ExpiringSecret


@dataclass(frozen=True, slots=True)
class SecretReport:
    """Aggregate root holding the result of one expiry check."""

    secrets: tuple[ExpiringSecret, ...]
    monitor_tag: str
    expiry_threshold_days: int
    generated_at: datetime

    def __post_init__(self) -> None:
        """Normalize the secrets container and the timestamp."""
        object.__setattr__(self, "secrets", tuple(self.secrets))
        if self.generated_at.tzinfo is None:
            object.__setattr__(self, "generated_at", self.generated_at.replace(tzinfo=UTC))

    def __iter__(self) -> Iterator[ExpiringSecret]:
        return iter(self.secrets)

    def __len__(self) -> int:
        return len(self.secrets)

    @property
    def expired(self) -> list[ExpiringSecret]:
        """Get secrets that have already expired."""
        return [s for s in self.secrets if s.is_expired]

    @property
    def affected_applications_count(self) -> int:
        """Count of unique applications with at least one reported secret."""
        return len({s.application_id for s in self.secrets})

    @property
    def timestamp(self) -> str:
        """Generation time in UTC, formatted as RFC 3339 with a ``Z`` suffix."""
        return self.generated_at.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")

    def get_summary(self) -> str:
        """Generate a human-readable summary of the report."""
        if not self.secrets:
            return "No expiring secrets found"

        expired = len(self.expired)
        parts = [f"{len(self.secrets)} expiring secrets in {self.affected_applications_count} applications"]
        if expired:
            parts.append(f"{expired} already expired")
        return ", ".join(parts)
