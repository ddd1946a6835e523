"""Entra ID adapters backed by Microsoft Graph."""

from .graph_client import GraphClient, GraphClientConfig
from .repository import EntraIdApplicationRepository

__all__ = [
    "EntraIdApplicationRepository",
    "GraphClient",
    "GraphClientConfig",
]
