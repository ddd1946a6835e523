"""Password credential entity representing an application secret."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

HOURS_PER_DAY = 24


@dataclass(frozen=True, slots=True)
class PasswordCredential:
    """A client secret attached to an application registration."""

    key_id: str | None
    end_date_time: datetime | None
    display_name: str | None = None

    @property
    def has_expiry(self) -> bool:
        """Check if the directory reported an expiry timestamp."""
        return self.end_date_time is not None

    @property
    def expiry_utc(self) -> datetime | None:
        """Expiry timestamp normalized to UTC (naive values are assumed UTC)."""
        if self.end_date_time is None:
            return None
        if self.end_date_time.tzinfo is None:
            return self.end_date_time.replace(tzinfo=UTC)
        return self.end_date_time.astimezone(UTC)

    @property
    def expiry_date(self) -> date | None:
        """Calendar date of expiry in UTC."""
        expiry = self.expiry_utc
        return expiry.date() if expiry else None

    def days_until_expiry(self, now: datetime) -> int | None:
        """
        Whole days remaining until expiry, relative to ``now``.

        The remaining time is measured in fractional hours, divided by 24 and
        truncated, so 23h59m left is 0 days and 24h01m left is 1 day. Already
        expired secrets yield zero or negative values.

        Returns:
            Days until expiry, or None if the credential has no expiry.
        """
        expiry = self.expiry_utc
        if expiry is None:
            return None
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        hours = (expiry - now).total_seconds() / 3600
        return int(hours / HOURS_PER_DAY)
