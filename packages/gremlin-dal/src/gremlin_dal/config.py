"""Configuration management.

Uses pydantic-settings for type-safe configuration from environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package settings.

    All settings can be overridden via environment variables.
    Prefix: GREMLIN_DAL_
    """

    model_config = SettingsConfigDict(
        env_prefix="GREMLIN_DAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Graph store
    host: str = Field(
        default="localhost",
        description="Host name of the Gremlin server or Neptune cluster endpoint",
    )
    port: int = Field(default=8182, description="Gremlin server port")
    use_ssl: bool = Field(default=True, description="Connect with wss:// instead of ws://")
    traversal_source: str = Field(
        default="g",
        description="Traversal source name bound on the server",
    )
    pool_size: int = Field(default=4, ge=1, description="Driver connection pool size")

    # Dispatch
    strict_component_type: bool = Field(
        default=False,
        description="Raise instead of returning zero rows for an unknown componenttype",
    )

    # Logging
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING or ERROR")
    log_format: str = Field(default="console", description="console or json")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
