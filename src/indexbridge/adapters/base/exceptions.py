"""Adapter-specific exceptions."""

from __future__ import annotations


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the adapter cannot reach or handshake with the search backend."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""


class AlreadyExistsError(AdapterError):
    """Raised when creating an index that already exists.

    Also raised when a concurrent creator wins the race between the
    existence check and the create call.
    """

    def __init__(self, index: str) -> None:
        super().__init__(f"Index '{index}' already exists")
        self.index = index


class MalformedQueryError(AdapterError, ValueError):
    """Raised when a recognized query body key has the wrong shape."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"Malformed '{key}' clause: {message}")
        self.key = key
