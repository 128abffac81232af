"""Logging, metrics and tracing emitted by the index."""

from title_index.observability.bootstrap import configure_observability
from title_index.observability.logging import IndexLogFormatter, configure_logging
from title_index.observability.metrics import OPERATIONS, SEARCH_LATENCY, SEARCH_MATCHES, record_operation
from title_index.observability.tracing import init_tracing, search_span


__all__ = [
    "OPERATIONS",
    "SEARCH_LATENCY",
    "SEARCH_MATCHES",
    "IndexLogFormatter",
    "configure_logging",
    "configure_observability",
    "init_tracing",
    "record_operation",
    "search_span",
]
