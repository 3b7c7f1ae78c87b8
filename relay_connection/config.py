"""
Configuration Module

Pydantic Settings for the library defaults and the demo service.

Values are read from environment variables (case-insensitive) and fall
back to a local .env file, then to the defaults below.

The library core only reads ``DirectiveSettings``; the demo-only values
live on ``Settings`` so a host application's environment never has to
satisfy them.

Usage:
    from relay_connection.config import get_settings

    settings = get_settings()
    print(settings.database_url)
"""

import re
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# GraphQL names: /[_A-Za-z][_0-9A-Za-z]*/
GRAPHQL_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")

DEFAULT_DIRECTIVE_NAME = "connection"


class DirectiveSettings(BaseSettings):
    """Settings read by the connection directive."""

    directive_name: str = Field(
        default=DEFAULT_DIRECTIVE_NAME,
        description="Name of the field directive that marks paginated fields"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("directive_name")
    @classmethod
    def validate_directive_name(cls, v: str) -> str:
        """
        Validate that the directive name is a legal GraphQL name.

        The name is interpolated into SDL, so anything else would produce
        a schema that fails to parse much later and far from the cause.

        Raises:
            ValueError: If the name is not a GraphQL name
        """
        if not GRAPHQL_NAME_RE.match(v):
            raise ValueError(f"directive_name must be a GraphQL name, got {v!r}")
        return v


class Settings(DirectiveSettings):
    """
    Settings for the demo service.

    Includes the directive settings so the demo can log the name in use.
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = Field(
        default="Relay Connection Demo",
        description="Application name displayed in docs and logs"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (detailed errors, SQL echo)"
    )

    # -------------------------------------------------------------------------
    # Database Settings
    # -------------------------------------------------------------------------
    database_url: str = Field(
        default="sqlite:///./relay_connection_demo.db",
        description="SQLAlchemy database URL for the demo service"
    )

    # -------------------------------------------------------------------------
    # HTTP Settings
    # -------------------------------------------------------------------------
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated list of allowed CORS origins"
    )

    # -------------------------------------------------------------------------
    # Logging Settings
    # -------------------------------------------------------------------------
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.allowed_origins.split(",")]

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate that log_level is a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()


@lru_cache
def get_directive_settings() -> DirectiveSettings:
    """Get cached directive settings (see ``get_settings``)."""
    return DirectiveSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get cached demo settings.

    The first call reads the environment and .env file; later calls
    return the same instance. Tests that change the environment call
    ``get_settings.cache_clear()``.

    Returns:
        Cached Settings instance
    """
    return Settings()
