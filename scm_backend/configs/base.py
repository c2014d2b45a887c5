"""
Shared settings behaviour.

Every settings class reads the process environment first and `.env`
second; unknown variables are ignored so one `.env` can serve all of them.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

ENV_FILE_CONFIG = dict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")


class BaseSettings(PydanticBaseSettings):
    """Application-wide settings (no env prefix)."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG)

    environment: str = Field(default="development", description="development, staging or production")
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed browser origins, JSON list in the environment",
    )
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()
