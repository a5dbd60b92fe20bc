"""HTTP Transport Adapters."""

from apps.api_client.infrastructure.http.httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
