"""Token Application Services."""

from apps.api_client.application.token.refresh_coordinator import RefreshCoordinator
from apps.api_client.application.token.token_store import TokenStore

__all__ = ["RefreshCoordinator", "TokenStore"]
