"""In-memory fuzzy title index.

Register titled documents, then query by an approximate title fragment:

    >>> from title_index import Document, new_index
    >>> index = new_index()
    >>> index.batch([Document("Another Movie", 1), Document("Documentary", 2)])
    >>> index.search("movie", 5)
    [1]
"""

from title_index.config import Settings, get_settings
from title_index.errors import (
    BatchError,
    EmptyQueryError,
    EmptyTitleError,
    NilDocumentError,
    NotFoundError,
    TitleIndexError,
)
from title_index.search import (
    Document,
    RankedResult,
    TitleIndex,
    TitleIndexProtocol,
    contains,
    new_index,
    similarity,
)


__version__ = "0.1.0"

__all__ = [
    "BatchError",
    "Document",
    "EmptyQueryError",
    "EmptyTitleError",
    "NilDocumentError",
    "NotFoundError",
    "RankedResult",
    "Settings",
    "TitleIndex",
    "TitleIndexError",
    "TitleIndexProtocol",
    "contains",
    "get_settings",
    "new_index",
    "similarity",
]
