"""Setup Module."""

from apps.api_client.setup.config import Settings, get_settings
from apps.api_client.setup.dependencies import Container
from apps.api_client.setup.logging import setup_logging

__all__ = ["Container", "Settings", "get_settings", "setup_logging"]
