"""Base adapter interface — Abstract class for search engine connectors."""

from indexbridge.adapters.base.adapter import IndexAdapter, Response

__all__ = ["IndexAdapter", "Response"]
