"""JSON log lines for index operations."""

from __future__ import annotations

from datetime import datetime, timezone
import logging
import sys
from typing import Any

from opentelemetry import trace
import orjson


# Fields the index passes through ``extra=``; anything else is left out
INDEX_FIELDS = ("index", "operation", "query", "title", "limit", "matches", "stored", "failed", "replaced")


def _clean(value: Any) -> Any:
    # orjson rejects lone surrogates, which titles may legitimately contain
    if isinstance(value, str):
        return value.encode("utf-8", errors="backslashreplace").decode("utf-8")
    return value


class IndexLogFormatter(logging.Formatter):
    """Render a record as one JSON object with its index fields and active span."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _clean(record.getMessage()),
        }
        for field in INDEX_FIELDS:
            if field in record.__dict__:
                entry[field] = _clean(record.__dict__[field])

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            entry["trace_id"] = format(span_context.trace_id, "032x")
            entry["span_id"] = format(span_context.span_id, "016x")

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return orjson.dumps(entry, default=str).decode("utf-8")


def configure_logging(level: str = "info", json_output: bool = True) -> None:
    """Send root logging to stdout, as JSON lines or plain text."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(IndexLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    root.addHandler(handler)
