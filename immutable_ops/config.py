"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the library works with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings affect ambient behaviour only (logging, cheatsheet rendering), never operation results

Design Decisions:
    - IMMUTABLE_OPS_ prefix: library settings must not collide with the host application's env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


LOG_FORMATS: tuple[str, ...] = ("json", "text")


class Settings(BaseSettings):
    """Library settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="IMMUTABLE_OPS_", env_file=".env",
        case_sensitive=False, extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Accept any casing; reject formats setup_logging cannot build."""
        value = str(v).strip().lower()
        if value not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}")
        return value

    # Cheatsheet
    cheatsheet_title: str = "Avoiding Mutation"
    cheatsheet_verify: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
