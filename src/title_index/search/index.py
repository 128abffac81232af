"""In-memory fuzzy title index.

Titles map to opaque payloads in a plain dict guarded by a single
reader/writer lock. A search scans every entry, keeps the titles that contain
the query (Boyer-Moore-Horspool prefilter), scores them with Jaro-Winkler and
returns the best payloads first.
"""

from __future__ import annotations

from collections.abc import Iterable
import logging
from typing import Generic, Protocol, TypeVar, runtime_checkable

from title_index.config import Settings, get_settings
from title_index.errors import (
    BatchError,
    EmptyQueryError,
    EmptyTitleError,
    NilDocumentError,
    NotFoundError,
    TitleIndexError,
)
from title_index.observability.metrics import SEARCH_MATCHES, record_operation, timed_search
from title_index.observability.tracing import search_span
from title_index.search.locks import ReadWriteLock
from title_index.search.matcher import Needle, similarity
from title_index.search.models import Document, RankedResult


logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class TitleIndexProtocol(Protocol):
    """Surface consumed by collaborators that build documents and display results."""

    def add(self, document: Document | None) -> None:  # pragma: no cover - Protocol only
        """Store a document, overwriting any entry with the same title."""

    def batch(self, documents: Iterable[Document | None]) -> None:  # pragma: no cover - Protocol only
        """Store every document, reporting all failures at the end."""

    def search(self, query: str, limit: int | None = None) -> list:  # pragma: no cover - Protocol only
        """Return the payloads whose titles best match the query."""

    def length(self) -> int:  # pragma: no cover - Protocol only
        """Return the number of distinct titles."""


class TitleIndex(Generic[T]):
    """Thread-safe title -> payload index with fuzzy title search.

    Writers (``add``/``batch``) take the lock exclusively for each insert;
    readers (``search``/``length``) share it for a full scan. A batch is not
    atomic, so concurrent readers may observe it partially applied.

    Args:
        settings: Scoring and default-limit configuration. Falls back to the
            environment-driven process settings.
        name: Label used for metrics and logs when several indexes coexist.
    """

    def __init__(self, settings: Settings | None = None, *, name: str = "default") -> None:
        settings = settings or get_settings()
        self.name = name
        self._boost_threshold = settings.similarity_boost_threshold
        self._prefix_size = settings.similarity_prefix_size
        self._default_limit = settings.default_search_limit
        self._lock = ReadWriteLock()
        self._entries: dict[str, T] = {}

    def add(self, document: Document[T] | None) -> None:
        """Insert or overwrite the entry for ``document.title``.

        Raises:
            NilDocumentError: document is None. The index is left untouched.
            TypeError: document is not a Document.
        """
        if document is None:
            record_operation("add", "nil_document")
            raise NilDocumentError()
        if not isinstance(document, Document):
            record_operation("add", "invalid")
            raise TypeError(f"Expected Document, got {type(document).__name__}")

        with self._lock.write_locked():
            replaced = document.title in self._entries
            self._entries[document.title] = document.payload

        record_operation("add", "replaced" if replaced else "ok")
        logger.debug(
            "Stored title in index %s",
            self.name,
            extra={"index": self.name, "operation": "add", "title": document.title, "replaced": replaced},
        )

    def batch(self, documents: Iterable[Document[T] | None] | None) -> None:
        """Add every document in order, continuing past failed items.

        Each item is its own write-lock acquisition.

        Raises:
            NilDocumentError: documents is empty or None.
            BatchError: one or more items failed; ``failures`` lists
                ``(position, error)`` for each of them. All other items
                were stored.
        """
        items = list(documents) if documents is not None else []
        if not items:
            record_operation("batch", "nil_document")
            raise NilDocumentError()

        failures: list[tuple[int, Exception]] = []
        for position, document in enumerate(items):
            try:
                self.add(document)
            except (TitleIndexError, TypeError) as exc:
                failures.append((position, exc))

        if failures:
            record_operation("batch", "partial")
            stored = len(items) - len(failures)
            logger.warning(
                "Batch into index %s stored %d of %d documents",
                self.name,
                stored,
                len(items),
                extra={"index": self.name, "operation": "batch", "stored": stored, "failed": len(failures)},
            )
            raise BatchError(failures) from failures[0][1]

        record_operation("batch", "ok")
        logger.debug(
            "Batch into index %s stored %d documents",
            self.name,
            len(items),
            extra={"index": self.name, "operation": "batch", "stored": len(items), "failed": 0},
        )

    def search(self, query: str, limit: int | None = None) -> list[T]:
        """Return up to ``limit`` payloads, most similar title first.

        Raises:
            EmptyQueryError: query is empty.
            NotFoundError: no stored title contains the query.
            ValueError: limit is negative.
        """
        return [result.payload for result in self.rank(query, limit)]

    def rank(self, query: str, limit: int | None = None) -> list[RankedResult[T]]:
        """Like ``search`` but keeps the title and similarity of every hit.

        The result holds ``min(limit, matches)`` entries, never padding.
        """
        if not query:
            record_operation("search", "empty_query")
            raise EmptyQueryError()
        if limit is None:
            limit = self._default_limit
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        needle = Needle.compile(query)
        with search_span(self.name, query, limit) as span:
            with timed_search(), self._lock.read_locked():
                matches = self._score_entries(needle, query)

            span.set_attribute("search.matches", len(matches))
            SEARCH_MATCHES.observe(len(matches))

            if not matches:
                record_operation("search", "not_found")
                raise NotFoundError()

            matches.sort(key=lambda result: result.similarity, reverse=True)

        record_operation("search", "ok")
        logger.debug(
            "Search in index %s matched %d titles",
            self.name,
            len(matches),
            extra={"index": self.name, "operation": "search", "query": query, "limit": limit, "matches": len(matches)},
        )
        return matches[:limit]

    def _score_entries(self, needle: Needle, query: str) -> list[RankedResult[T]]:
        # Caller must hold the read lock
        matches: list[RankedResult[T]] = []
        for title, payload in self._entries.items():
            if not needle.matches(title):
                continue
            try:
                score = similarity(
                    title,
                    query,
                    boost_threshold=self._boost_threshold,
                    prefix_size=self._prefix_size,
                )
            except EmptyTitleError:
                logger.debug(
                    "Skipping entry with empty title in index %s",
                    self.name,
                    extra={"index": self.name, "operation": "search", "query": query},
                )
                continue
            matches.append(RankedResult(title=title, payload=payload, similarity=score))
        return matches

    def length(self) -> int:
        """Number of distinct titles currently stored."""
        with self._lock.read_locked():
            return len(self._entries)

    def __len__(self) -> int:
        return self.length()

    def __contains__(self, title: object) -> bool:
        with self._lock.read_locked():
            return title in self._entries

    def __repr__(self) -> str:
        return f"TitleIndex(name={self.name!r}, length={self.length()})"


def new_index(settings: Settings | None = None, *, name: str = "default") -> TitleIndex:
    """Construct an empty index. Its state lives as long as the returned handle."""
    return TitleIndex(settings, name=name)
