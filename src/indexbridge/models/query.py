"""Query request models and the generic query-body parser.

A query body is a loosely-typed mapping with up to four recognized keys::

    {
        "match": [{"status": "active"}],
        "wildcard": [{"name": "jo"}],
        "sort": [{"name.raw": "asc"}],
        "size": 10
    }

``parse_query_body`` turns it into a ``QueryRequest``. Unknown keys are
ignored; a recognized key with the wrong shape raises ``MalformedQueryError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field

from indexbridge.adapters.base.exceptions import MalformedQueryError

DEFAULT_SIZE = 10

SORT_DIRECTIONS = ("asc", "desc")


class FieldValue(BaseModel):
    """A single field/value condition."""

    field: str = Field(description="Document field name")
    value: str = Field(description="Value to match")


class FieldDirection(BaseModel):
    """A single field/sort-direction pair."""

    field: str = Field(description="Document field to sort on")
    direction: Literal["asc", "desc"] = Field(description="Sort direction")


class QueryRequest(BaseModel):
    """Structured form of a generic query body."""

    matches: list[FieldValue] = Field(default_factory=list, description="Exact-term conditions")
    wildcards: list[FieldValue] = Field(default_factory=list, description="Substring-pattern conditions")
    sorts: list[FieldDirection] = Field(default_factory=list, description="Sort clauses in order")
    size: int | None = Field(default=None, description="Result cap (None = default)")

    @property
    def effective_size(self) -> int:
        return DEFAULT_SIZE if self.size is None else self.size

    def must_clauses(self) -> list[dict[str, Any]]:
        """Term clauses for ``matches`` followed by ``*value*`` wildcard clauses."""
        clauses: list[dict[str, Any]] = [{"term": {m.field: m.value}} for m in self.matches]
        clauses.extend({"wildcard": {w.field: f"*{w.value}*"}} for w in self.wildcards)
        return clauses

    def sort_clauses(self) -> list[dict[str, Any]]:
        return [{s.field: {"order": s.direction}} for s in self.sorts]

    def to_query(self) -> dict[str, Any]:
        return {"bool": {"must": self.must_clauses()}}


def parse_query_body(body: Mapping[str, Any]) -> QueryRequest:
    """Interpret a generic query body.

    Args:
        body: Mapping with optional ``match``, ``wildcard``, ``sort`` and
            ``size`` keys. Other keys are ignored.

    Returns:
        The parsed ``QueryRequest``.

    Raises:
        MalformedQueryError: If a recognized key does not have the expected shape.
    """
    if not isinstance(body, Mapping):
        raise MalformedQueryError("body", f"expected a mapping, got {type(body).__name__}")

    request = QueryRequest()
    for key, value in body.items():
        if key == "match":
            request.matches.extend(_parse_field_values(key, value))
        elif key == "wildcard":
            request.wildcards.extend(_parse_field_values(key, value))
        elif key == "sort":
            for field, direction in _iter_pairs(key, value):
                if direction in SORT_DIRECTIONS:
                    request.sorts.append(FieldDirection(field=field, direction=direction))
        elif key == "size":
            # bool is an int subclass but not a size
            if isinstance(value, int | float) and not isinstance(value, bool):
                request.size = int(value)
    return request


def _parse_field_values(key: str, value: Any) -> list[FieldValue]:
    # Empty values are no-ops, not match-everything.
    return [FieldValue(field=field, value=v) for field, v in _iter_pairs(key, value) if v]


def _iter_pairs(key: str, entries: Any) -> list[tuple[str, str]]:
    """Flatten a list of single-field mappings into (field, string value) pairs."""
    if not isinstance(entries, list | tuple):
        raise MalformedQueryError(key, f"expected a list of mappings, got {type(entries).__name__}")

    pairs: list[tuple[str, str]] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise MalformedQueryError(key, f"expected a mapping entry, got {type(entry).__name__}")
        for field, v in entry.items():
            if not isinstance(v, str):
                raise MalformedQueryError(key, f"value for field '{field}' must be a string, got {type(v).__name__}")
            pairs.append((str(field), v))
    return pairs
