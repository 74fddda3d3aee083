"""
Centralized configuration management using Pydantic BaseSettings.
Supports SQLite for local work and PostgreSQL for deployed environments.
"""

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Environment types for the application."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class DatabaseType(str, Enum):
    """Supported database types."""

    SQLITE = "sqlite"
    POSTGRESQL = "postgresql"


class Settings(BaseSettings):
    """
    Application settings with support for multiple environments.
    Values are read from the environment and an optional .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Current environment (development, staging, production, testing)",
    )

    # Database Configuration
    database_type: DatabaseType = Field(
        default=DatabaseType.SQLITE,
        description="Database type (sqlite or postgresql)",
    )
    database_url: str = Field(
        default="sqlite:///./data/commerce.db",
        description="Database connection URL",
    )
    database_echo: bool = Field(
        default=False,
        description="Echo SQL statements to the log",
    )
    create_tables: bool = Field(
        default=True,
        description="Create missing tables on application startup",
    )

    # API Configuration
    api_title: str = Field(
        default="Commerce API",
        description="Title shown in the OpenAPI document",
    )
    api_host: str = Field(
        default="0.0.0.0",
        description="API host",
    )
    api_port: int = Field(
        default=8000,
        description="API port",
    )
    api_prefix: str = Field(
        default="",
        description="Prefix for every resource router, e.g. /api/v1",
    )
    api_reload: bool = Field(
        default=False,
        description="Enable auto-reload for development",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Application log level",
    )
    log_format: str = Field(
        default="text",
        description="Log format (json/text)",
    )
    log_file_path: Path | None = Field(
        default=None,
        description="Log file path",
    )

    # Listing
    list_default_limit: int = Field(
        default=10,
        description="Number of resources returned by list endpoints when no limit is given",
        ge=1,
    )

    # Credentials
    password_salt_length: int = Field(
        default=15,
        description="Length of the random salt generated for each user password",
        ge=8,
    )
    password_hash_length: int = Field(
        default=128,
        description="Length in bytes of the derived password hash",
        ge=16,
    )

    @computed_field
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    @computed_field
    def is_postgresql(self) -> bool:
        """Check if using PostgreSQL database."""
        return self.database_type == DatabaseType.POSTGRESQL

    def get_database_url(self, async_mode: bool = False) -> str:
        """Get database URL, switching to the async driver when requested."""
        if self.database_type == DatabaseType.SQLITE:
            if async_mode and "+aiosqlite" not in self.database_url:
                return self.database_url.replace("sqlite://", "sqlite+aiosqlite://")
            return self.database_url
        if async_mode and "+asyncpg" not in self.database_url:
            return self.database_url.replace("postgresql://", "postgresql+asyncpg://")
        return self.database_url

    def validate_paths(self) -> None:
        """Create the directory of a file-based SQLite database if missing."""
        prefix = "sqlite:///"
        if self.database_type == DatabaseType.SQLITE and self.database_url.startswith(prefix):
            db_path = self.database_url[len(prefix):]
            if db_path and db_path != ":memory:":
                Path(db_path).parent.mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> "Settings":
    """Uses LRU cache to ensure single instance across application."""
    return Settings()


# Global settings instance
settings = get_settings()
