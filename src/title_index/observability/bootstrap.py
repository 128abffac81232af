"""Wire logging and tracing from Settings."""

from __future__ import annotations

from title_index.config import Settings, get_settings
from title_index.observability.logging import configure_logging
from title_index.observability.tracing import init_tracing


def configure_observability(settings: Settings | None = None) -> None:
    """Configure logging and the index tracer for the host process."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)
    init_tracing(settings.service_name)
