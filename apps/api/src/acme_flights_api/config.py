"""API configuration via environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """Application settings loaded from environment / .env file."""

    database_url: str = "postgresql+asyncpg://localhost:5432/acme_flights"
    redis_url: str = "redis://localhost:6379/0"
    cors_origins: list[str] = ["http://localhost:3000"]
    route_prefix: str = "/flight"

    # Flight lookup cache
    flight_cache_enabled: bool = True
    flight_cache_ttl: int = 300  # 5 min

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTS_", env_file=".env", extra="ignore"
    )


settings = ApiSettings()
