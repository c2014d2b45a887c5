"""
Platform API client configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Configuration for the token-refreshing REST client and mock mode
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from scm_backend.configs.base import ENV_FILE_CONFIG, BaseSettings


class PlatformApiSettings(BaseSettings):
    """Settings for the platform REST API client."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="PLATFORM_API_")

    base_url: str = Field(
        default="http://localhost:8000/api/v1",
        description="Platform REST API base URL",
    )
    live: bool = Field(
        default=True,
        description="Send requests over the network; False serves static mock responses",
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    mock_delay: float = Field(
        default=0.0,
        description="Artificial latency (seconds) added to mock responses",
    )
