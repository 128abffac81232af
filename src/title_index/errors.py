"""Error taxonomy for the title index.

Callers are expected to branch on the exception type, never on the message.
"""

from __future__ import annotations


class TitleIndexError(Exception):
    """Base error for title index operations."""


class EmptyTitleError(TitleIndexError):
    """Raised when similarity is requested against an empty title."""

    def __init__(self, message: str = "title is empty") -> None:
        super().__init__(message)


class EmptyQueryError(TitleIndexError):
    """Raised when a search is issued with an empty query."""

    def __init__(self, message: str = "query is empty") -> None:
        super().__init__(message)


class NilDocumentError(TitleIndexError):
    """Raised when a document is missing or a batch is empty."""

    def __init__(self, message: str = "document is nil") -> None:
        super().__init__(message)


class NotFoundError(TitleIndexError):
    """Raised when a search completes without a single match."""

    def __init__(self, message: str = "not found") -> None:
        super().__init__(message)


class BatchError(TitleIndexError):
    """Raised after a batch finished with one or more failed items.

    ``failures`` holds ``(position, error)`` pairs in input order. Items that
    did not fail were stored regardless.
    """

    def __init__(self, failures: list[tuple[int, Exception]]) -> None:
        self.failures = list(failures)
        positions = ", ".join(str(position) for position, _ in self.failures)
        super().__init__(f"{len(self.failures)} document(s) failed in batch (positions: {positions})")

    @property
    def errors(self) -> list[Exception]:
        return [error for _, error in self.failures]
