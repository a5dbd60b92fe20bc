"""API Client Presentation Layer."""

from apps.api_client.presentation.facade import ApiFacade

__all__ = ["ApiFacade"]
