"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables (never hardcoded in code paths)
    - get_settings() is cached (lru_cache), one instance per process
    - DATABASE_URL, when set, wins over the DATABASE_* parts

Design Decisions:
    - Separate DATABASE_* parts: deployments hand out host/user/password/name,
      not a ready-made URL
    - max_overflow is not configurable: the pool stays a fixed size
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Database
    database_url: str | None = None
    database_driver: str = "postgresql+asyncpg"
    database_host: str = "localhost"
    database_port: int | None = None
    database_user: str = "incalink"
    database_password: str = "incalink"
    database_name: str = "incalink"
    database_pool_size: int = 10

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Plain postgresql:// URLs need the asyncpg driver suffix."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str | URL:
        if self.database_url:
            return self.database_url
        return URL.create(
            drivername=self.database_driver,
            username=self.database_user,
            password=self.database_password,
            host=self.database_host,
            port=self.database_port,
            database=self.database_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
