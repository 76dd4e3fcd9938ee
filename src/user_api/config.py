"""Configuration management for the user API.

This module provides centralized configuration management using Pydantic settings
with environment variable support, validation, and error handling.
"""

from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings with environment variable support and validation."""
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    # PostgreSQL Configuration
    postgres_host: Annotated[str, Field(description="PostgreSQL host")] = "localhost"
    postgres_port: Annotated[int, Field(description="PostgreSQL port")] = 5432
    postgres_db: Annotated[str, Field(description="PostgreSQL database name")] = "users_db"
    postgres_user: Annotated[str, Field(description="PostgreSQL user")] = "testuser"
    postgres_password: Annotated[str, Field(description="PostgreSQL password")] = "testpass"
    database_url: Annotated[
        Optional[str], Field(description="Full database URL, overrides the POSTGRES_* settings")
    ] = None

    debug: Annotated[bool, Field(description="Enable debug mode")] = False
    log_level: Annotated[str, Field(description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")] = "INFO"

    # Response Configuration
    environment: Annotated[str, Field(description="Application environment (development, testing, production)")] = "development"
    suppress_error_details: Annotated[bool, Field(description="Omit details from error responses")] = False
    allowed_origins: Annotated[
        Optional[str], Field(description="Value of the Access-Control-Allow-Origin header")
    ] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the allowed values."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"log_level must be one of {allowed_levels}")
        return v.upper()

    @field_validator("postgres_port")
    @classmethod
    def validate_postgres_port(cls, v: int) -> int:
        """Validate the port is a usable TCP port."""
        if not 0 < v < 65536:
            raise ValueError("postgres_port must be between 1 and 65535")
        return v

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: Optional[str]) -> Optional[str]:
        """Validate database URL format."""
        if v is not None and not v.startswith(("postgresql://", "postgresql+psycopg2://", "sqlite:///")):
            raise ValueError("database_url must be a valid PostgreSQL or SQLite URL")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def suppress_details(self) -> bool:
        """Check if error details must be left out of responses."""
        return self.is_production or self.suppress_error_details

    @property
    def cors_origin(self) -> str:
        """Origin advertised in the Access-Control-Allow-Origin header."""
        if self.allowed_origins:
            return self.allowed_origins
        return "https://yourdomain.com" if self.is_production else "http://localhost:3000"

    @property
    def sqlalchemy_url(self) -> str:
        """Database URL handed to SQLAlchemy."""
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+psycopg2",
            username=self.postgres_user,
            password=self.postgres_password,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db,
        ).render_as_string(hide_password=False)


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""
    pass


def get_settings() -> Settings:
    """Get application settings with error handling.

    Returns:
        Settings: Validated application settings

    Raises:
        ConfigurationError: If configuration validation fails
    """
    try:
        return Settings()
    except Exception as e:
        raise ConfigurationError(f"Configuration validation failed: {str(e)}") from e


# Global settings instance
settings = get_settings()
