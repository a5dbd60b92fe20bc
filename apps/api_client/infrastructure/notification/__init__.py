"""Notification Adapters."""

from apps.api_client.infrastructure.notification.logging_notifier import LoggingNotifier

__all__ = ["LoggingNotifier"]
