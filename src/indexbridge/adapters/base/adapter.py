"""Base index adapter — Abstract interface for search engine connectors.

Every search backend implements this interface to be usable by
``QueryInterpreter`` and application code. The adapter is responsible for:
  1. Connecting to one search endpoint
  2. Index lifecycle (create, refresh, mapping and settings updates)
  3. Writing and deleting documents
  4. Executing queries and returning the engine-native response
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Self

Response = dict[str, Any]
"""Engine-native response payload, passed through unchanged."""


class IndexAdapter(ABC):
    """Abstract base class for index adapters.

    All operations are synchronous single request/response calls and none
    retry internally. Adapters hold no per-request state, so one instance
    may be shared across threads.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique adapter name (e.g., 'opensearch')."""

    @abstractmethod
    def initialize(self) -> None:
        """Create the client and verify the endpoint is reachable.

        Raises:
            ConnectionError: If the endpoint cannot be reached or rejects the handshake.
        """

    @abstractmethod
    def shutdown(self) -> None:
        """Close the client and release its connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.shutdown()

    # ── Index lifecycle ──

    @abstractmethod
    def create_index(self, index: str) -> Response:
        """Create ``index`` if it does not exist yet.

        Raises:
            AlreadyExistsError: If the index exists or was created concurrently.
        """

    @abstractmethod
    def refresh_index(self, index: str) -> Response:
        """Make recent writes to ``index`` visible to searches."""

    @abstractmethod
    def update_mapping(self, index: str, doc_type: str | None, mapping: Mapping[str, Any] | str) -> Response:
        """Forward a raw mapping body to the engine."""

    @abstractmethod
    def update_settings(self, index: str, settings: Mapping[str, Any] | str) -> Response:
        """Forward a raw settings body to the engine."""

    # ── Documents ──

    @abstractmethod
    def upsert_document(
        self,
        index: str,
        doc_type: str | None,
        doc_id: str,
        body: Mapping[str, Any],
    ) -> Response:
        """Create or overwrite the document stored at ``doc_id``. Last write wins."""

    @abstractmethod
    def import_raw(self, data: str, index: str) -> Response:
        """Index a pre-serialized JSON document as-is."""

    @abstractmethod
    def delete_by_type(self, index: str, doc_type: str) -> Response:
        """Delete every document of ``doc_type`` in ``index``."""

    # ── Queries ──

    @abstractmethod
    def fetch_by_ids(
        self,
        index: str,
        doc_type: str | None,
        ids: Sequence[Any],
        size: int,
    ) -> Response:
        """Fetch documents whose ``id`` field matches any of ``ids``."""

    @abstractmethod
    def fetch_by_term_and_sort(
        self,
        field: str,
        keyword: str,
        index: str,
        sort_field: str,
        limit: int,
    ) -> Response:
        """Fetch documents with ``field == keyword``, ascending by ``sort_field``."""

    @abstractmethod
    def search(
        self,
        index: str,
        doc_type: str | None,
        query: Mapping[str, Any],
        sort: Sequence[Mapping[str, Any]] | None = None,
        size: int = 10,
    ) -> Response:
        """Execute a query DSL body against ``index``."""
