"""Domain entities - Objects with identity and lifecycle."""

from .application import ApplicationRegistration
from .credential import PasswordCredential
from .expiring_secret import ExpiringSecret
from .secret_report import SecretReport

__all__ = [
    "ApplicationRegistration",
    "ExpiringSecret",
    "PasswordCredential",
    "SecretReport",
]
