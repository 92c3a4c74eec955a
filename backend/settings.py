"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() wherever a setting is needed; use cases take an optional
Settings instance so tests can pass their own.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.environment)
    print(settings.workout_list_default_limit)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production, test",
    )

    # -------------------------------------------------------------------------
    # Workout Listing
    # -------------------------------------------------------------------------
    workout_list_default_limit: int = Field(
        default=50,
        ge=1,
        description="Page size used when a caller lists workouts without a limit",
    )
    workout_list_max_limit: int = Field(
        default=200,
        ge=1,
        description="Upper bound applied to any requested list limit",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @model_validator(mode="after")
    def validate_list_limits(self) -> "Settings":
        """The default page size may not exceed the maximum."""
        if self.workout_list_default_limit > self.workout_list_max_limit:
            raise ValueError(
                "workout_list_default_limit cannot exceed workout_list_max_limit"
            )
        return self

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"

    def resolve_list_limit(self, requested: Optional[int]) -> int:
        """Apply the default page size and cap a requested limit."""
        if requested is None:
            return self.workout_list_default_limit
        return max(1, min(requested, self.workout_list_max_limit))


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
