"""Query body interpreter — Runs generic query bodies through an adapter.

Example:
    >>> interpreter = QueryInterpreter(adapter)
    >>> interpreter.search("people", "person", {
    ...     "match": [{"status": "active"}],
    ...     "wildcard": [{"name": "jo"}],
    ...     "sort": [{"name.raw": "asc"}],
    ...     "size": 3,
    ... })
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from indexbridge.adapters.base.adapter import IndexAdapter, Response
from indexbridge.models.query import QueryRequest, parse_query_body

logger = logging.getLogger(__name__)


class QueryInterpreter:
    """Translates generic query bodies into boolean-must searches.

    Args:
        adapter: Connected adapter that executes the search. The interpreter
            does not own it and never closes it.
    """

    def __init__(self, adapter: IndexAdapter) -> None:
        self._adapter = adapter

    def build(self, body: Mapping[str, Any]) -> QueryRequest:
        """Parse ``body`` without executing it.

        Raises:
            MalformedQueryError: If a recognized key has the wrong shape.
        """
        return parse_query_body(body)

    def search(self, index: str, doc_type: str | None, body: Mapping[str, Any]) -> Response:
        """Parse ``body`` and execute it against ``index``.

        All must clauses are AND-ed, results are ordered by the sort clauses
        (engine default when none) and capped at the requested size.

        Returns:
            The engine-native search response.
        """
        request = self.build(body)
        logger.debug(
            "Interpreted query for %s: %d must clauses, %d sort clauses, size %d",
            index,
            len(request.matches) + len(request.wildcards),
            len(request.sorts),
            request.effective_size,
        )
        return self._adapter.search(
            index,
            doc_type,
            request.to_query(),
            sort=request.sort_clauses(),
            size=request.effective_size,
        )
