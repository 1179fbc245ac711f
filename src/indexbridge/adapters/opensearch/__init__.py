"""OpenSearch adapter built on ``opensearch-py``."""

from indexbridge.adapters.opensearch.adapter import OpenSearchAdapter

__all__ = ["OpenSearchAdapter"]
