"""Application use cases."""

from .check_expiring_secrets import CheckExpiringSecrets

__all__ = ["CheckExpiringSecrets"]
