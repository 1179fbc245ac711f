"""OpenSearch adapter — Index management and queries for OpenSearch (v2+).

OpenSearch is an AWS-maintained fork of Elasticsearch with a compatible
query DSL and API surface. This adapter uses the synchronous
``opensearch-py`` client and returns its native response dicts unchanged.

Mapping types were removed from current engines, so a document type is
stored as a keyword field (``ConnectionConfig.type_field``) inside each
document and type-scoped operations filter on it.

Usage::

    with OpenSearchAdapter.connect("http://localhost", 9200) as adapter:
        adapter.create_index("people")
        adapter.upsert_document("people", "person", "1", {"id": 1, "name": "John"})
        adapter.refresh_index("people")
        adapter.fetch_by_ids("people", "person", [1], size=10)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from opensearchpy import OpenSearch
from opensearchpy import exceptions as os_exceptions
from pydantic import ValidationError

from indexbridge.adapters.base.adapter import IndexAdapter, Response
from indexbridge.adapters.base.exceptions import (
    AlreadyExistsError,
    ConfigurationError,
    ConnectionError,
)
from indexbridge.models.connection import ConnectionConfig

if TYPE_CHECKING:
    from indexbridge.config.settings import Settings

logger = logging.getLogger(__name__)

_ALREADY_EXISTS = "resource_already_exists_exception"


class OpenSearchAdapter(IndexAdapter):
    """Index adapter for OpenSearch (v2+).

    Supports:
      - Index creation guarded by an existence check
      - Document upsert, raw import and delete by type
      - Term, match-phrase, wildcard and boolean queries with sort and size
      - Refresh, mapping and settings updates

    Args:
        config: Connection parameters for the endpoint.
    """

    def __init__(self, config: ConnectionConfig) -> None:
        self._config = config
        self._client: Any = None

    @classmethod
    def connect(cls, host: str, port: int | str, **options: Any) -> OpenSearchAdapter:
        """Build a config from ``host``, ``port`` and ``options`` and connect.

        Raises:
            ConfigurationError: If the parameters do not form a valid config.
            ConnectionError: If the endpoint cannot be reached.
        """
        try:
            config = ConnectionConfig(host=host, port=port, **options)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid OpenSearch connection config: {e}") from e
        adapter = cls(config)
        adapter.initialize()
        return adapter

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenSearchAdapter:
        """Create and connect an adapter from application settings."""
        adapter = cls(settings.connection_config())
        adapter.initialize()
        return adapter

    @property
    def name(self) -> str:
        return "opensearch"

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    def initialize(self) -> None:
        """Create the ``OpenSearch`` client and perform the handshake."""
        config = self._config
        client_kwargs: dict[str, Any] = {
            "hosts": [config.url],
            "verify_certs": config.verify_certs,
            "ssl_show_warn": False,
            "sniff_on_start": config.sniff,
            "sniff_on_connection_fail": config.sniff,
        }
        if config.username and config.password:
            client_kwargs["http_auth"] = (config.username, config.password)

        client_kwargs.update(config.extra)

        try:
            client = OpenSearch(**client_kwargs)
            info = client.info()
            if config.health_check:
                health = client.cluster.health()
                if health.get("status") == "red":
                    raise ConnectionError(f"OpenSearch cluster {health.get('cluster_name')} is unhealthy (red)")
        except ConnectionError:
            raise
        except Exception as e:
            raise ConnectionError(f"Failed to connect to OpenSearch at {config.url}: {e}") from e

        self._client = client
        version = info.get("version", {}).get("number", "unknown")
        cluster = info.get("cluster_name", "unknown")
        logger.info("Connected to OpenSearch cluster: %s (v%s) at %s", cluster, version, config.url)

    def shutdown(self) -> None:
        """Close the OpenSearch client."""
        if self._client:
            self._client.close()
            self._client = None

    # ── Index lifecycle ──────────────────────────────────────────────────

    def create_index(self, index: str) -> Response:
        """Create ``index`` unless it exists.

        The existence check and the create call are two separate requests.
        A concurrent creator between them surfaces as ``AlreadyExistsError``
        from the create step; it is not retried.
        """
        _require_index(index)
        client = self._require_client()
        if self._call(client.indices.exists, index=index):
            raise AlreadyExistsError(index)

        try:
            response = self._call(client.indices.create, index=index, body=self._index_body())
        except os_exceptions.RequestError as e:
            if e.error == _ALREADY_EXISTS:
                raise AlreadyExistsError(index) from e
            raise

        logger.info("Created index: %s", index)
        return response

    def refresh_index(self, index: str) -> Response:
        client = self._require_client()
        return self._call(client.indices.refresh, index=index)

    def update_mapping(self, index: str, doc_type: str | None, mapping: Mapping[str, Any] | str) -> Response:
        """Forward a mapping body to ``indices.put_mapping``.

        A legacy typed body (``{"<doc_type>": {"properties": ...}}``) is
        unwrapped to its inner mapping. Anything else is sent unchanged.
        """
        client = self._require_client()
        body: Any = mapping
        if doc_type and isinstance(mapping, Mapping) and list(mapping) == [doc_type]:
            body = mapping[doc_type]

        response = self._call(client.indices.put_mapping, index=index, body=body)
        logger.info("Updated mapping for index: %s", index)
        return response

    def update_settings(self, index: str, settings: Mapping[str, Any] | str) -> Response:
        client = self._require_client()
        response = self._call(client.indices.put_settings, index=index, body=settings)
        logger.info("Updated settings for index: %s", index)
        return response

    # ── Documents ────────────────────────────────────────────────────────

    def upsert_document(
        self,
        index: str,
        doc_type: str | None,
        doc_id: str,
        body: Mapping[str, Any],
    ) -> Response:
        client = self._require_client()
        document = dict(body)
        if doc_type:
            document[self._config.type_field] = doc_type
        return self._call(client.index, index=index, id=doc_id, body=document)

    def import_raw(self, data: str, index: str) -> Response:
        client = self._require_client()
        return self._call(client.index, index=index, body=data)

    def delete_by_type(self, index: str, doc_type: str) -> Response:
        client = self._require_client()
        body = {"query": {"term": {self._config.type_field: doc_type}}}
        return self._call(client.delete_by_query, index=index, body=body)

    # ── Queries ──────────────────────────────────────────────────────────

    def fetch_by_ids(
        self,
        index: str,
        doc_type: str | None,
        ids: Sequence[Any],
        size: int,
    ) -> Response:
        """Fetch documents whose ``id`` field matches any of ``ids``.

        ``minimum_should_match`` keeps the should-clauses required next to a
        type filter. An empty bool query matches everything, so an empty
        ``ids`` collection adds a ``must_not: match_all`` to match nothing.
        """
        bool_query: dict[str, Any] = {
            "should": [{"match_phrase": {"id": doc_id}} for doc_id in ids],
            "minimum_should_match": 1,
        }
        if not bool_query["should"]:
            bool_query["must_not"] = [{"match_all": {}}]
        query = {"bool": bool_query}
        return self.search(index, doc_type, query, size=size)

    def fetch_by_term_and_sort(
        self,
        field: str,
        keyword: str,
        index: str,
        sort_field: str,
        limit: int,
    ) -> Response:
        client = self._require_client()
        body = {
            "query": {"term": {field: keyword}},
            "sort": [{sort_field: {"order": "asc"}}],
            "from": 0,
            "size": limit,
        }
        logger.debug("OpenSearch search on %s: %s", index, body)
        return self._call(client.search, index=index, body=body)

    def search(
        self,
        index: str,
        doc_type: str | None,
        query: Mapping[str, Any],
        sort: Sequence[Mapping[str, Any]] | None = None,
        size: int = 10,
    ) -> Response:
        client = self._require_client()
        body: dict[str, Any] = {"query": self._scope_to_type(query, doc_type), "size": size}
        if sort:
            body["sort"] = list(sort)

        logger.debug("OpenSearch search on %s: %s", index, body)
        return self._call(client.search, index=index, body=body)

    # ── Helpers ──────────────────────────────────────────────────────────

    def _require_client(self) -> Any:
        if not self._client:
            raise ConnectionError("OpenSearch client not initialized.")
        return self._client

    def _index_body(self) -> dict[str, Any]:
        """Mappings sent on create; the type field must not be analyzed."""
        return {"mappings": {"properties": {self._config.type_field: {"type": "keyword"}}}}

    def _scope_to_type(self, query: Mapping[str, Any], doc_type: str | None) -> dict[str, Any]:
        """Add a type filter to ``query`` when ``doc_type`` is given."""
        if not doc_type:
            return dict(query)
        type_filter = {"term": {self._config.type_field: doc_type}}
        inner = query.get("bool")
        if len(query) == 1 and isinstance(inner, Mapping):
            scoped = dict(inner)
            scoped["filter"] = [*_as_list(inner.get("filter")), type_filter]
            return {"bool": scoped}
        return {"bool": {"must": [dict(query)], "filter": [type_filter]}}

    @staticmethod
    def _call(func: Callable[..., Any], /, **kwargs: Any) -> Any:
        """Invoke a client method, translating transport failures."""
        try:
            return func(**kwargs)
        except os_exceptions.ConnectionError as e:
            raise ConnectionError(f"OpenSearch request failed: {e}") from e


def _require_index(index: str) -> None:
    if not index or not index.strip():
        raise ValueError("Index name must be non-empty")


def _as_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
