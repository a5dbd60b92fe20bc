"""Navigation Adapters."""

from apps.api_client.infrastructure.navigation.callback_navigator import CallbackNavigator

__all__ = ["CallbackNavigator"]
