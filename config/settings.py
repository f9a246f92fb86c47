"""Application settings using pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings are organized into logical groups:
    - Environment: Runtime environment and logging configuration
    - API Keys: External service authentication
    - Judges: Model and sampling parameters for the LLM judge scorers
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Environment
    # ==========================================================================
    env: str = "development"
    """Runtime environment: development, staging, or production."""

    log_level: str = "INFO"
    """Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL."""

    log_json: bool = False
    """Emit JSON log lines instead of colored console output."""

    # ==========================================================================
    # API Keys (Optional)
    # ==========================================================================
    openai_api_key: SecretStr | None = None
    """OpenAI API key for the LLM judge scorers."""

    # ==========================================================================
    # Judge Settings
    # ==========================================================================
    weather_judge_model: str = "gpt-4.1"
    """Model used by the weather-specific judge."""

    weather_judge_temperature: float | None = 0.1
    """Sampling temperature for the weather judge (low to reduce variance)."""

    general_judge_model: str = "gpt-4o-mini"
    """Model used by the general judge."""

    general_judge_temperature: float | None = None
    """Sampling temperature for the general judge. None keeps the provider default."""

    judge_max_concurrent: int = 5
    """Maximum concurrent cases scored by the batch runner."""

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("env")
    @classmethod
    def validate_env(cls, v: str) -> str:
        """Validate environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v.lower() not in allowed:
            raise ValueError(f"env must be one of {allowed}, got '{v}'")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v.upper()

    @field_validator("weather_judge_temperature", "general_judge_temperature")
    @classmethod
    def validate_temperature(cls, v: float | None) -> float | None:
        """Validate temperature is between 0 and 2."""
        if v is not None and not 0.0 <= v <= 2.0:
            raise ValueError(f"judge temperature must be between 0.0 and 2.0, got {v}")
        return v

    @field_validator("judge_max_concurrent")
    @classmethod
    def validate_max_concurrent(cls, v: int) -> int:
        """Validate concurrency limit is positive."""
        if v < 1:
            raise ValueError(f"judge_max_concurrent must be at least 1, got {v}")
        return v

    # ==========================================================================
    # Computed Properties
    # ==========================================================================
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"

    @property
    def use_json_logs(self) -> bool:
        """JSON log lines when asked for explicitly or running in production."""
        return self.log_json or self.is_production


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the lifetime of the application.
    To reload settings, call `get_settings.cache_clear()` first.
    """
    return Settings()
