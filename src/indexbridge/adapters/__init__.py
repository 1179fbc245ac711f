"""Index adapter layer — Connectors for search backends.

Built-in adapters:
  - opensearch: OpenSearch v2+ (Elasticsearch-compatible query DSL)

Implement ``IndexAdapter`` to connect another search backend.
"""
