"""Prometheus metrics for index operations.

Labels are limited to the operation and its outcome so the series count stays
fixed no matter how many indexes a process creates.
"""

from __future__ import annotations

from contextlib import contextmanager
import time
from typing import TYPE_CHECKING

from prometheus_client import Counter, Histogram


if TYPE_CHECKING:
    from collections.abc import Generator


OPERATIONS = Counter(
    "title_index_operations_total",
    "Index operations by outcome",
    ["operation", "status"],
)

SEARCH_LATENCY = Histogram(
    "title_index_search_latency_seconds",
    "Time spent scanning and scoring entries per search",
    buckets=(0.0005, 0.001, 0.0025, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5),
)

SEARCH_MATCHES = Histogram(
    "title_index_search_matches",
    "Titles that passed the substring prefilter per search",
    buckets=(0, 1, 5, 10, 50, 100, 500, 1000, 5000),
)


def record_operation(operation: str, status: str) -> None:
    OPERATIONS.labels(operation=operation, status=status).inc()


@contextmanager
def timed_search() -> Generator[None, None, None]:
    """Observe the duration of the enclosed scan in SEARCH_LATENCY."""
    start = time.perf_counter()
    try:
        yield
    finally:
        SEARCH_LATENCY.observe(time.perf_counter() - start)
