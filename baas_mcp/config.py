"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for all non-secret settings: works out-of-the-box against the public API
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Meeting BaaS
    baas_api_key: str = ""
    baas_api_url: str = "https://api.meetingbaas.com"
    baas_timeout_seconds: float = 30.0

    @field_validator("baas_api_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """httpx joins base_url + path; a trailing slash would double up."""
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # MCP server identity (reported by initialize)
    server_name: str = "meeting-baas-mcp"
    server_version: str = "1.0.0"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
