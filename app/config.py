"""
Application configuration with Pydantic Settings for validation and type safety.
Supports environment-specific configurations and .env file loading.
"""

import logging
from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or .env file.
    """

    # Application settings
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )

    # Mapping defaults
    date_pattern: str = Field(
        default="dd.MM.yyyy",
        min_length=1,
        description="Date pattern used by DateFormat rules without an explicit pattern",
    )
    number_pattern: str = Field(
        default="$###,###,###",
        min_length=1,
        description="Number pattern used by NumberFormat rules without an explicit pattern",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize and check the logging level name"""
        if isinstance(v, str):
            v = v.upper()
            if not isinstance(logging.getLevelName(v), int):
                raise ValueError(f"Unknown log level: {v}")
        return v

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


def configure_logging(config: Optional[Settings] = None) -> None:
    """Setup logging with configured level and format."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()), format=config.log_format
    )


# Global settings instance
settings = Settings()
