"""Expiring secret entity - one reported credential."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ExpiringSecret:
    """A password credential within the expiry threshold, copied out of its application."""

    application_name: str
    application_id: str
    secret_id: str
    expiry_date: date
    days_to_expiry: int

    @property
    def is_expired(self) -> bool:
        """Check if the secret has already expired."""
        return self.days_to_expiry < 0
