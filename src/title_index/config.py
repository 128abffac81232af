"""Centralized configuration for title-index using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from environment variables.

    Every field can be overridden with a ``TITLE_INDEX_`` prefixed variable,
    e.g. ``TITLE_INDEX_DEFAULT_SEARCH_LIMIT=25``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TITLE_INDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Similarity scoring (Jaro-Winkler)
    similarity_boost_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Minimum Jaro similarity before the shared-prefix boost is applied",
    )
    similarity_prefix_size: int = Field(
        default=4,
        ge=0,
        description="Maximum number of leading characters rewarded by the prefix boost",
    )

    # Search
    default_search_limit: int = Field(
        default=10,
        ge=1,
        description="Number of results returned when a search does not specify a limit",
    )

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=True, description="Emit structured JSON logs")

    # Observability
    service_name: str = Field(default="title-index", description="OpenTelemetry service.name resource attribute")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"debug", "info", "warning", "error", "critical"}:
            raise ValueError(f"Unsupported log level: {value!r}")
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
