"""Connection configuration model for a single search-engine endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConnectionConfig(BaseModel):
    """Immutable connection parameters for one search endpoint.

    The endpoint URL is ``host`` and ``port`` joined with a colon, e.g.
    ``ConnectionConfig(host="http://localhost", port=9200).url`` is
    ``"http://localhost:9200"``.
    """

    model_config = ConfigDict(frozen=True)

    host: str = Field(default="http://localhost", description="Endpoint host including scheme")
    port: int = Field(default=9200, description="Endpoint port")
    sniff: bool = Field(default=False, description="Discover cluster nodes on start and on connection failure")
    health_check: bool = Field(default=False, description="Require non-red cluster health on connect")
    username: str | None = Field(default=None, description="HTTP basic-auth username")
    password: str | None = Field(default=None, description="HTTP basic-auth password")
    verify_certs: bool = Field(default=True, description="Verify TLS certificates")
    type_field: str = Field(default="doc_type", description="Document field holding the document type")
    extra: dict[str, Any] = Field(default_factory=dict, description="Extra keyword arguments for the client")

    @field_validator("host")
    @classmethod
    def _strip_host(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("host must be non-empty")
        return v

    @property
    def url(self) -> str:
        return f"{self.host}:{self.port}"
