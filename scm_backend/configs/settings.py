"""
Aggregated application settings.

Dependencies: scm_backend.configs.*
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from scm_backend.configs.base import BaseSettings
from scm_backend.configs.database import DatabaseSettings
from scm_backend.configs.integrations import IntegrationSettings
from scm_backend.configs.platform_api import PlatformApiSettings
from scm_backend.configs.webhooks import WebhookSettings


class Settings(BaseSettings):
    """Top-level settings; each section reads its own env prefix."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    integrations: IntegrationSettings = Field(default_factory=IntegrationSettings)
    platform_api: PlatformApiSettings = Field(default_factory=PlatformApiSettings)
    webhooks: WebhookSettings = Field(default_factory=WebhookSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Settings singleton, read from the environment once per process.

    Tests that change the environment call `get_settings.cache_clear()`.
    """
    return Settings()
