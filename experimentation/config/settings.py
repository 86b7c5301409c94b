"""
Application Settings
===================

Experiment settings and environment configuration using Pydantic Settings.
Supports development, testing, and production environments.
"""

from typing import Optional, Union
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
    """Experiment settings with environment variable support."""

    # Application Configuration
    app_name: str = Field(default="ContinuITy Experimentation", description="Application name")
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[Path] = Field(
        default=None, description="Optional log file; enables a rotating file handler"
    )

    # Frontend Configuration
    frontend_host: str = Field(default="localhost", description="ContinuITy frontend host")
    frontend_port: str = Field(default="80", description="ContinuITy frontend port")
    request_timeout: float = Field(
        default=60.0, gt=0, description="Total timeout of a single HTTP request in seconds"
    )

    # Workload Model Polling Configuration
    wait_timeout: int = Field(
        default=40000, gt=0, description="Server-side wait per polling request in milliseconds"
    )
    max_wait_attempts: int = Field(
        default=181, gt=0, description="Maximum number of wait requests per workload model"
    )
    poll_interval: float = Field(
        default=0.0, ge=0, description="Client-side delay between unfinished wait requests"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    @field_validator("frontend_port", mode="before")
    @classmethod
    def parse_port(cls, v: Union[str, int]) -> str:
        """Accept numeric ports and keep them as strings."""
        return str(v).strip()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="CONTINUITY_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
