"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - GEMINI_API_KEY is required: Settings() raises when it is absent or blank
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: PORT 3001 matches the dashboard's dev proxy
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Gemini
    gemini_api_key: str
    gemini_model: str = "gemini-2.0-flash"

    @field_validator("gemini_api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError(
                "GEMINI_API_KEY is not set. Add GEMINI_API_KEY='YOUR_API_KEY_HERE' "
                "to the environment or a .env file in the backend directory.",
            )
        return v

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 3001
    max_body_bytes: int = 10 * 1024 * 1024

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"
    prompt_log_preview_chars: int = 500


@lru_cache
def get_settings() -> Settings:
    return Settings()
