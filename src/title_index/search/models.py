"""Search data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Document(Generic[T]):
    """A titled document handed to the index.

    The title is the unique key; the payload is stored and returned verbatim.
    """

    title: str
    payload: T


@dataclass(frozen=True, slots=True)
class RankedResult(Generic[T]):
    """A matched entry with its similarity to the query."""

    title: str
    payload: T
    similarity: float

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {"title": self.title, "payload": self.payload, "similarity": self.similarity}
