"""OpenTelemetry spans around index searches."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import Status, StatusCode


if TYPE_CHECKING:
    from collections.abc import Generator

    from opentelemetry.trace import Span


_provider_holder: dict[str, Any] = {"provider": None}


def init_tracing(service_name: str = "title-index") -> TracerProvider:
    """Create the provider used for index spans.

    The provider is not installed globally; the host application decides
    where spans are exported by adding processors to it. Without a call to
    this function spans go to whatever global provider is configured.
    """
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    _provider_holder["provider"] = provider
    return provider


def _get_tracer() -> trace.Tracer:
    provider = _provider_holder["provider"]
    if provider is None:
        return trace.get_tracer(__name__)
    return provider.get_tracer(__name__)


@contextmanager
def search_span(index_name: str, query: str, limit: int) -> Generator[Span, None, None]:
    """Span covering one search; failures mark it as an error."""
    attributes = {"index.name": index_name, "search.query": query, "search.limit": limit}
    with _get_tracer().start_as_current_span(
        "title_index.search",
        attributes=attributes,
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as exc:
            span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
            span.record_exception(exc)
            raise
