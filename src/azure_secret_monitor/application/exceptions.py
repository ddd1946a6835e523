"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class ConfigurationError(ApplicationError):
    """Raised when configuration is invalid."""


class AuthenticationError(ApplicationError):
    """Raised when authenticating against the identity provider fails."""


class DirectoryQueryError(ApplicationError):
    """Raised when listing application registrations fails."""
