"""Integration test fixtures — a real OpenSearch node on localhost.

Expects a backend running via, for example:
    docker run -p 9200:9200 -e discovery.type=single-node \
        -e DISABLE_SECURITY_PLUGIN=true opensearchproject/opensearch:2

Tests skip when the node is not reachable.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Iterator

import httpx
import pytest

from indexbridge.adapters.opensearch.adapter import OpenSearchAdapter

OPENSEARCH_HOST = "http://localhost"
OPENSEARCH_PORT = 9200


def _wait_for_service(url: str, timeout: float = 60.0) -> bool:
    """Block until *url* returns HTTP 200, or timeout."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        try:
            r = httpx.get(url, timeout=30)
            if r.status_code == 200:
                return True
        except httpx.HTTPError:
            pass
        time.sleep(2)
    return False


@pytest.fixture(scope="session")
def opensearch_url() -> str:
    """Ensure OpenSearch is running."""
    url = f"{OPENSEARCH_HOST}:{OPENSEARCH_PORT}"
    if not _wait_for_service(url, timeout=10.0):
        pytest.skip(f"OpenSearch not available at {url}")
    return url


@pytest.fixture
def adapter(opensearch_url: str) -> Iterator[OpenSearchAdapter]:
    with OpenSearchAdapter.connect(OPENSEARCH_HOST, OPENSEARCH_PORT) as a:
        yield a


@pytest.fixture
def index_name(opensearch_url: str) -> Iterator[str]:
    """A unique index name, deleted after the test."""
    name = f"indexbridge-test-{uuid.uuid4().hex[:8]}"
    yield name
    httpx.delete(f"{opensearch_url}/{name}", params={"ignore_unavailable": "true"}, timeout=30)
