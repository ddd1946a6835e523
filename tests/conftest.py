"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from azure_secret_monitor.domain.entities import ApplicationRegistration, PasswordCredential
from azure_secret_monitor.domain.value_objects import TagPattern

MONITOR_TAG = "MonitorSecrets"


@pytest.fixture
def now() -> datetime:
    """Fixed evaluation instant."""
    return datetime(2024, 12, 22, 0, 0, tzinfo=UTC)


@pytest.fixture
def monitor_tag() -> TagPattern:
    """Default monitor tag pattern."""
    return TagPattern(MONITOR_TAG)


@pytest.fixture
def expiring_credential(now: datetime) -> PasswordCredential:
    """A secret expiring on 2025-01-15, 24 days after ``now``."""
    return PasswordCredential(
        key_id="12345678-1234-1234-1234-123456789012",
        end_date_time=datetime(2025, 1, 15, 0, 0, tzinfo=UTC),
        display_name="Expiring Secret",
    )


@pytest.fixture
def expired_credential(now: datetime) -> PasswordCredential:
    """A secret that expired five days before ``now``."""
    return PasswordCredential(
        key_id="aaaaaaaa-0000-0000-0000-000000000001",
        end_date_time=now - timedelta(days=5),
        display_name="Expired Secret",
    )


@pytest.fixture
def healthy_credential(now: datetime) -> PasswordCredential:
    """A secret not expiring for half a year."""
    return PasswordCredential(
        key_id="aaaaaaaa-0000-0000-0000-000000000002",
        end_date_time=now + timedelta(days=180),
        display_name="Healthy Secret",
    )


@pytest.fixture
def tagged_application(
    expiring_credential: PasswordCredential,
    healthy_credential: PasswordCredential,
) -> ApplicationRegistration:
    """A monitored application with one expiring and one healthy secret."""
    return ApplicationRegistration(
        object_id="obj-1",
        app_id="cf6d6be9-1111-2222-3333-444455556666",
        display_name="MyApp1",
        tags=frozenset({MONITOR_TAG}),
        password_credentials=(expiring_credential, healthy_credential),
    )


@pytest.fixture
def untagged_application(expired_credential: PasswordCredential) -> ApplicationRegistration:
    """An application without the monitor tag."""
    return ApplicationRegistration(
        object_id="obj-2",
        app_id="0e1d2c3b-1111-2222-3333-444455556666",
        display_name="Unmonitored App",
        tags=frozenset({"Production"}),
        password_credentials=(expired_credential,),
    )
