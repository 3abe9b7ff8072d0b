"""
Configuration management using Pydantic Settings.

Process-wide, read-only configuration loaded once from environment variables
prefixed with FLEXERR_. Nothing here is mutated after startup; the tracer
backend chosen here is bound to every error type defined without an explicit
tracer.

Usage:
    from flexerr.core.config import settings

    if settings.capture_backtrace:
        ...

Environment variables:
    FLEXERR_TRACER: backtrace | string | null
    FLEXERR_CAPTURE_BACKTRACE: walk the call stack on capture (true/false)
    FLEXERR_BACKTRACE_LIMIT: maximum frames kept per trace
    FLEXERR_ENVIRONMENT: development | testing | ci | production
    FLEXERR_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    FLEXERR_LOG_JSON: force JSON log rendering
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flexerr.core.enums import Environment, TracerBackend

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables (FLEXERR_*)
        2. Default values

    Returns:
        Settings: Library configuration loaded from environment.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )

    # Tracing
    tracer: TracerBackend = Field(
        default=TracerBackend.BACKTRACE,
        description="Default tracer backend bound to newly defined error types",
    )
    capture_backtrace: bool = Field(
        default=True,
        description="Walk the call stack when the backtrace tracer captures a trace",
    )
    backtrace_limit: int = Field(
        default=32,
        description="Maximum number of frames kept in a captured backtrace",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool = Field(
        default=False,
        description="Render logs as JSON regardless of environment",
    )

    model_config = SettingsConfigDict(
        env_prefix="FLEXERR_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("backtrace_limit")
    @classmethod
    def validate_backtrace_limit(cls, v: int) -> int:
        """
        Validate backtrace limit is within a bounded range.

        Args:
            v: Maximum number of frames.

        Returns:
            int: Validated frame limit.

        Raises:
            ValueError: If limit is not between 1 and 256.
        """
        if not 1 <= v <= 256:
            raise ValueError("backtrace_limit must be between 1 and 256")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def use_json_logs(self) -> bool:
        """Check if logs should be rendered as JSON."""
        return self.log_json or self.environment != Environment.DEVELOPMENT


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


settings = get_settings()
