"""Port for application repository - driven/secondary port."""

from typing import Protocol

from ...domain.entities import ApplicationRegistration


class ApplicationRepository(Protocol):
    """
    Port for retrieving application registrations from the directory.

    This is a driven (secondary) port that defines how the application
    obtains its read-only snapshot of registrations and their secrets.
    """

    def list_applications(self) -> list[ApplicationRegistration]:
        """
        Retrieve all application registrations.

        Returns:
            Registrations in directory listing order.

        Raises:
            AuthenticationError: If the directory rejects the credentials.
            DirectoryQueryError: If the listing call fails.
        """
        ...
