"""Centralized configuration for search-server using Pydantic Settings."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strictly typed configuration loaded from ``SEARCH_SERVER_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SEARCH_SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        extra="ignore",  # Ignore extra env vars not defined in model
    )

    # Ranking
    max_result_document_count: int = Field(default=5, ge=1, description="Maximum results returned per query")
    relevance_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        description="Relevance difference below which results are ordered by rating instead",
    )

    # Analysis
    stop_words: str = Field(default="", description="Space-separated stop words registered on new engines")

    # Logging
    log_level: str = Field(default="info", description="Logging level")
    log_json: bool = Field(default=False, description="Emit structured JSON logs")

    # Observability
    service_name: str = Field(default="search-server", description="Service name reported to OpenTelemetry")
    tracing_enabled: bool = Field(default=True, description="Wrap engine operations in OpenTelemetry spans")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if not isinstance(logging.getLevelName(normalized), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return normalized.lower()

    def get_stop_words(self) -> list[str]:
        """Get list of configured stop words."""
        return [word for word in self.stop_words.split(" ") if word]
