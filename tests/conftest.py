"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from indexbridge.adapters.opensearch.adapter import OpenSearchAdapter
from indexbridge.config.settings import Settings
from indexbridge.models.connection import ConnectionConfig


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        opensearch={"host": "http://search.test", "port": 9201},
    )


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(host="http://localhost", port=9200)


@pytest.fixture
def mock_client() -> MagicMock:
    """A stand-in for ``opensearchpy.OpenSearch`` with canned responses."""
    client = MagicMock()
    client.info.return_value = {"cluster_name": "test-cluster", "version": {"number": "2.13.0"}}
    client.cluster.health.return_value = {"status": "green", "cluster_name": "test-cluster"}
    client.indices.exists.return_value = False
    client.indices.create.return_value = {"acknowledged": True, "index": "people"}
    client.search.return_value = {"took": 1, "hits": {"total": {"value": 0}, "hits": []}}
    return client


@pytest.fixture
def adapter(connection_config: ConnectionConfig, mock_client: MagicMock) -> OpenSearchAdapter:
    """An adapter wired to ``mock_client`` without a real handshake."""
    a = OpenSearchAdapter(connection_config)
    a._client = mock_client
    return a


@pytest.fixture
def sample_body() -> dict[str, Any]:
    """The documented example query body."""
    return {
        "match": [{"status": "active"}],
        "wildcard": [{"name": "jo"}],
        "sort": [{"name.raw": "asc"}],
        "size": 3,
    }
