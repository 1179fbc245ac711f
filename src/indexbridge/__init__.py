"""IndexBridge — A thin adapter layer over OpenSearch with a generic query-body interpreter.

Quick start::

    from indexbridge import OpenSearchAdapter, QueryInterpreter

    adapter = OpenSearchAdapter.connect("http://localhost", 9200)
    interpreter = QueryInterpreter(adapter)
    interpreter.search("people", None, {"match": [{"status": "active"}], "size": 3})
"""

from indexbridge.adapters.base.adapter import IndexAdapter
from indexbridge.adapters.base.exceptions import (
    AdapterError,
    AlreadyExistsError,
    ConfigurationError,
    ConnectionError,
    MalformedQueryError,
)
from indexbridge.adapters.opensearch.adapter import OpenSearchAdapter
from indexbridge.core.interpreter import QueryInterpreter
from indexbridge.models.connection import ConnectionConfig
from indexbridge.models.query import QueryRequest, parse_query_body

__version__ = "0.1.0"

__all__ = [
    "AdapterError",
    "AlreadyExistsError",
    "ConfigurationError",
    "ConnectionConfig",
    "ConnectionError",
    "IndexAdapter",
    "MalformedQueryError",
    "OpenSearchAdapter",
    "QueryInterpreter",
    "QueryRequest",
    "__version__",
    "parse_query_body",
]
