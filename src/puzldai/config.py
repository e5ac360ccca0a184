"""Configuration module using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"

    # Cache
    cache_backend: str = "memory"  # Cache backend: "memory" or "redis"
    cache_ttl_seconds: int | None = None  # Advisory, not applied to entries
    cache_max_size: int | None = None  # Advisory, never enforced
    redis_url: str | None = None  # e.g. redis://localhost:6379/0


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function for quick access
settings = get_settings()
