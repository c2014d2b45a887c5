"""
Typed configuration loaded with pydantic-settings.

One settings class per concern, each with its own environment prefix.
"""

from scm_backend.configs.database import DatabaseSettings
from scm_backend.configs.integrations import IntegrationSettings
from scm_backend.configs.platform_api import PlatformApiSettings
from scm_backend.configs.settings import Settings, get_settings
from scm_backend.configs.webhooks import WebhookSettings

__all__ = [
    "DatabaseSettings",
    "IntegrationSettings",
    "PlatformApiSettings",
    "Settings",
    "WebhookSettings",
    "get_settings",
]
