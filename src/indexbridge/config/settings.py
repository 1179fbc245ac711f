"""Application settings — Pydantic-based configuration with env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (INDEXBRIDGE_ prefix)
  2. A ``.env`` file in the working directory
  3. Default values
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from indexbridge.models.connection import ConnectionConfig


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")


class Settings(BaseSettings):
    """Root settings.

    Nested settings use double underscores:

    Example:
        INDEXBRIDGE_OPENSEARCH__HOST=https://search.internal
        INDEXBRIDGE_OPENSEARCH__PORT=9201
        INDEXBRIDGE_OBSERVABILITY__LOG_FORMAT=console
    """

    model_config = {
        "env_prefix": "INDEXBRIDGE_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    opensearch: ConnectionConfig = Field(default_factory=ConnectionConfig)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    def connection_config(self) -> ConnectionConfig:
        """Connection config for the adapter; the section is itself immutable."""
        return self.opensearch
