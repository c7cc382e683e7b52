"""
config.py — TaxAssist application settings.

Usage:
    from taxassist.config import settings
    print(settings.redis_url)

Import directly as a module-level singleton. Provider secrets are NOT settings:
they are entered by the user at runtime and live in the credential store.
"""
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Silently ignore any extra env vars
    )

    # --- Credential store ---
    # "redis" survives restarts; "memory" is process-local (tests, quick demos)
    credential_backend: Literal["redis", "memory"] = "redis"
    redis_url: str = "redis://localhost:6379"

    # --- OpenAI-compatible provider ---
    openai_model: str = "gpt-4o-mini"
    openai_max_tokens: int = 500
    openai_temperature: float = 0.7

    # --- Gemini-compatible provider ---
    gemini_model: str = "gemini-1.5-flash"

    # --- CORS ---
    # Comma-separated list of allowed frontend origins
    cors_origins: str = "http://localhost:5173,http://localhost:8080"

    # --- Application ---
    debug: bool = True
    app_version: str = "0.1.0"

    @property
    def cors_origins_list(self) -> List[str]:
        """Split comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Module-level singleton: import this throughout the codebase
settings = Settings()
