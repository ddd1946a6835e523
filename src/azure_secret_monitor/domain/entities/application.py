"""Application entity representing an Entra ID app registration."""

from dataclasses import dataclass, field

from .credential import PasswordCredential


@dataclass(frozen=True, slots=True)
class ApplicationRegistration:
    """An Entra ID application registration snapshot."""

    object_id: str
    app_id: str | None
    display_name: str | None
    tags: frozenset[str] = field(default_factory=frozenset)
    password_credentials: tuple[PasswordCredential, ...] = ()

    @property
    def is_identifiable(self) -> bool:
        """Check if the registration carries both an app ID and a display name."""
        return self.app_id is not None and self.display_name is not None
