"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets and deployment values come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Empty environment values count as absent
    - require(name) raises MissingEnvironmentError for absent required keys

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Required keys are Optional at construction: the process starts and logs what is
      missing, and each request needing a missing key fails with a 500 naming it
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.errors import MissingEnvironmentError

# Environment key → Settings attribute, for keys without a usable default
REQUIRED_KEYS: dict[str, str] = {
    "FIRST_NAME": "first_name",
    "LAST_NAME": "last_name",
    "ANTHROPIC_API_KEY": "anthropic_api_key",
}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Identity (/me)
    first_name: str | None = None
    last_name: str | None = None

    # Anthropic (/poem)
    anthropic_api_key: str | None = None
    anthropic_timeout_seconds: float = Field(60.0, gt=0)
    poem_model: str = "claude-3-5-haiku-latest"
    poem_max_tokens: int = Field(1000, ge=1, le=4096)
    poem_temperature: float | None = Field(0.7, ge=0.0, le=1.0)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator(
        "first_name", "last_name", "anthropic_api_key", "poem_temperature",
        mode="before",
    )
    @classmethod
    def blank_is_missing(cls, v):
        if isinstance(v, str) and not v:
            return None
        return v

    def require(self, name: str) -> str:
        """Return the value of a required environment key or raise."""
        value = getattr(self, REQUIRED_KEYS[name])
        if not value:
            raise MissingEnvironmentError(name)
        return value

    def missing_required(self) -> list[str]:
        return [
            name for name, attr in REQUIRED_KEYS.items()
            if not getattr(self, attr)
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
