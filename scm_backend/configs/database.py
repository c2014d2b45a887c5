"""
Database settings.

PostgreSQL through asyncpg by default. POSTGRES_URL, when set, is used
as-is so deployments (or local runs) can point at any async SQLAlchemy URL.

Dependencies: pydantic, pydantic_settings, sqlalchemy
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from scm_backend.configs.base import ENV_FILE_CONFIG, BaseSettings


class DatabaseSettings(BaseSettings):
    """Connection and pool settings (env prefix POSTGRES_)."""

    model_config = SettingsConfigDict(**ENV_FILE_CONFIG, env_prefix="POSTGRES_")

    url: str | None = Field(default=None, description="Full async SQLAlchemy URL override")
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    db: str = "supplychain"
    sslmode: str = Field(default="prefer", description="'require' enables TLS for managed databases")

    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = Field(default=30, description="Seconds to wait for a pooled connection")
    echo_sql: bool = False
    create_tables: bool = Field(default=False, description="Create missing tables at API startup")

    @property
    def async_database_url(self) -> URL:
        """
        URL handed to create_async_engine.

        URL.create escapes credentials, so passwords may contain '@' or '/'.
        asyncpg takes `ssl` rather than libpq's `sslmode`.
        """
        if self.url:
            return make_url(self.url)
        return URL.create(
            "postgresql+asyncpg",
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.db,
            query={"ssl": "require"} if self.sslmode == "require" else {},
        )

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.get_backend_name() == "sqlite"
