"""
Configuration management for database connections.

This module handles database configuration using Pydantic settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from phonestore.utils.logger import logger


class PostgresSettings(BaseSettings):
    """Database configuration using Pydantic settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False, extra="ignore", env_prefix="DB_"
    )

    host: str = Field(description="Database host")
    port: int = Field(default=5432, description="Database port")
    name: str = Field(description="Database name")
    username: str = Field(description="Database username")
    password: str | None = Field(default=None, description="Database user password")
    table_name: str | None = Field(
        default=None, description="Table for phone numbers; defaults to the database name"
    )
    ssl_enabled: bool = Field(default=False, description="Require TLS on the connection")
    echo: bool = Field(default=False, description="Echo SQL statements to logs")


# Global settings instance
_db_settings: PostgresSettings | None = None


def get_db_settings() -> PostgresSettings:
    """
    Get the global database settings instance.

    Returns:
        PostgresSettings: The global settings instance
    """
    global _db_settings
    if _db_settings is None:
        _db_settings = PostgresSettings()
        logger.info(
            f"PostgresSettings loaded. Host: {_db_settings.host}, "
            f"Port: {_db_settings.port}, Database: {_db_settings.name}"
        )
    return _db_settings


def set_db_settings(settings: PostgresSettings | None) -> None:
    """
    Set the global database settings instance.

    Useful for testing.

    Args:
        settings: The settings to set, or None to reload from the environment
    """
    global _db_settings
    _db_settings = settings
