"""Microsoft Graph API client for Entra ID."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar

import httpx
import msal

from ....application.exceptions import AuthenticationError, DirectoryQueryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Configuration for Microsoft Graph API client."""

    tenant_id: str
    client_id: str
    client_secret: str = field(repr=False)
    timeout: float = 30.0


class GraphClient:
    """
    Synchronous client for Microsoft Graph API.

    Handles client-credentials authentication and paginated listing requests.
    """

    GRAPH_BASE_URL: ClassVar[str] = "https://graph.microsoft.com/v1.0"
    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    SCOPE: ClassVar[list[str]] = ["https://graph.microsoft.com/.default"]
    APPLICATION_FIELDS: ClassVar[tuple[str, ...]] = (
        "id",
        "appId",
        "displayName",
        "tags",
        "passwordCredentials",
    )

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the Graph client.

        Args:
            config: Tenant and app credentials used for authentication.
            transport: Optional httpx transport, used to stub Graph in tests.
        """
        self._config = config
        self._transport = transport
        self._msal_app: msal.ConfidentialClientApplication | None = None

    def _get_msal_app(self) -> msal.ConfidentialClientApplication:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            authority = f"{self.AUTHORITY_BASE}/{self._config.tenant_id}"
            try:
                self._msal_app = msal.ConfidentialClientApplication(
                    client_id=self._config.client_id,
                    client_credential=self._config.client_secret,
                    authority=authority,
                )
            except Exception as e:
                msg = f"credential error: {e}"
                raise AuthenticationError(msg) from e
        return self._msal_app

    def _acquire_token(self) -> str:
        """Acquire access token using client credentials flow."""
        app = self._get_msal_app()
        try:
            result = app.acquire_token_for_client(scopes=self.SCOPE)
        except Exception as e:
            msg = f"failed to acquire access token: {e}"
            raise AuthenticationError(msg) from e

        if "access_token" not in result:
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"failed to acquire access token: {error}"
            raise AuthenticationError(msg)

        return result["access_token"]

    def get_applications(self) -> list[dict[str, Any]]:
        """
        Retrieve all application registrations.

        Returns:
            List of application dictionaries from Graph API.

        Raises:
            AuthenticationError: If no access token could be obtained.
            DirectoryQueryError: If a listing request fails.
        """
        logger.info("Fetching application registrations from Entra ID...")
        select = ",".join(self.APPLICATION_FIELDS)
        applications = self._get_all_pages(f"/applications?$select={select}")
        logger.info("Found %d application registrations", len(applications))
        return applications

    def _get_all_pages(self, endpoint: str) -> list[dict[str, Any]]:
        """
        Retrieve all pages from a paginated Graph API endpoint.

        Args:
            endpoint: The API endpoint path.

        Returns:
            Combined list of all results across pages.
        """
        token = self._acquire_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/json",
        }
        results: list[dict[str, Any]] = []
        url: str | None = endpoint

        try:
            with httpx.Client(timeout=self._config.timeout, transport=self._transport) as client:
                while url:
                    # Handle both relative and absolute URLs
                    full_url = url if url.startswith("http") else f"{self.GRAPH_BASE_URL}{url}"

                    response = client.get(full_url, headers=headers)
                    response.raise_for_status()
                    data = response.json()

                    page = data.get("value") if isinstance(data, dict) else None
                    if not isinstance(page, list):
                        msg = "response has no 'value' list"
                        raise DirectoryQueryError(msg)
                    results.extend(page)
                    url = data.get("@odata.nextLink")
        except httpx.HTTPStatusError as e:
            msg = f"Graph API returned HTTP {e.response.status_code} for {e.request.url.path}"
            raise DirectoryQueryError(msg) from e
        except (httpx.HTTPError, ValueError) as e:
            msg = f"Graph API request failed: {e}"
            raise DirectoryQueryError(msg) from e

        return results
