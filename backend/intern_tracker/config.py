"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every value can be overridden by an environment variable or .env entry
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults work out of the box: a local data/interns.json seeded on first run
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Store
    data_file: str = "data/interns.json"
    seed_data: bool = True

    # Dashboard: no interview entity exists, the count is supplied externally
    interviews_scheduled: int = Field(0, ge=0)

    # App
    app_name: str = "Intern Dashboard API"
    app_version: str = "1.0.0"
    environment: Literal["development", "production"] = "development"

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v: str) -> str:
        return v.strip().lower() if isinstance(v, str) else v

    # API
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
