"""Entra ID application repository implementation."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from typing import Any

from ....domain.entities import ApplicationRegistration, PasswordCredential
from .graph_client import GraphClient, GraphClientConfig

logger = logging.getLogger(__name__)

_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _list_or_empty(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


class EntraIdApplicationRepository:
    """
    Application repository implementation using Microsoft Graph API.

    Implements the ApplicationRepository port for Entra ID.
    """

    def __init__(self, config: GraphClientConfig, *, client: GraphClient | None = None) -> None:
        """
        Initialize the repository.

        Args:
            config: Configuration for the Graph API client.
            client: Preconfigured client, replacing the one built from ``config``.
        """
        self._client = client or GraphClient(config)

    def list_applications(self) -> list[ApplicationRegistration]:
        """
        Retrieve all application registrations with their password credentials.

        Raises:
            AuthenticationError: If authentication fails.
            DirectoryQueryError: If the listing fails.
        """
        raw_applications = self._client.get_applications()
        applications = [self._map_application(raw) for raw in raw_applications if isinstance(raw, dict)]
        if len(applications) != len(raw_applications):
            logger.warning("Skipped %d malformed application records", len(raw_applications) - len(applications))
        logger.debug(
            "Mapped %d applications with %d password credentials",
            len(applications),
            sum(len(app.password_credentials) for app in applications),
        )
        return applications

    def _map_application(self, raw: dict[str, Any]) -> ApplicationRegistration:
        """Map raw Graph API application data to domain entity."""
        display_name = _str_or_none(raw.get("displayName"))
        return ApplicationRegistration(
            object_id=_str_or_none(raw.get("id")) or "",
            app_id=_str_or_none(raw.get("appId")),
            display_name=display_name,
            tags=frozenset(tag for tag in _list_or_empty(raw.get("tags")) if isinstance(tag, str)),
            password_credentials=tuple(
                self._map_credential(cred, display_name)
                for cred in _list_or_empty(raw.get("passwordCredentials"))
                if isinstance(cred, dict)
            ),
        )

    def _map_credential(self, raw: dict[str, Any], app_name: str | None) -> PasswordCredential:
        """Map raw Graph API password credential data to domain entity."""
        expiry_str = raw.get("endDateTime")
        if expiry_str is not None and not isinstance(expiry_str, str):
            logger.warning("Ignoring non-string expiry date of secret %s in %s", raw.get("keyId", "unknown"), app_name)
            expiry_str = None
        expiry_date = self._parse_datetime(expiry_str) if expiry_str else None
        if expiry_date is None:
            logger.debug("Secret %s of %s has no usable expiry date", raw.get("keyId", "unknown"), app_name)

        return PasswordCredential(
            key_id=_str_or_none(raw.get("keyId")),
            end_date_time=expiry_date,
            display_name=_str_or_none(raw.get("displayName")),
        )

    @staticmethod
    def _parse_datetime(dt_string: str) -> datetime | None:
        """Parse ISO datetime string to datetime object."""
        try:
            # Graph uses a trailing Z and up to seven fractional digits
            dt_string = _EXCESS_FRACTION.sub(r"\1", dt_string.replace("Z", "+00:00"))
            dt = datetime.fromisoformat(dt_string)
            # Ensure timezone-aware
            return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
        except ValueError:
            logger.warning("Failed to parse datetime: %s", dt_string)
            return None
