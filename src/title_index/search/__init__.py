"""Fuzzy title search: matcher, storage and locking primitives."""

from title_index.search.index import TitleIndex, TitleIndexProtocol, new_index
from title_index.search.locks import ReadWriteLock
from title_index.search.matcher import NO_MATCH, Needle, build_shift_table, contains, find, similarity
from title_index.search.models import Document, RankedResult


__all__ = [
    "NO_MATCH",
    "Document",
    "Needle",
    "RankedResult",
    "ReadWriteLock",
    "TitleIndex",
    "TitleIndexProtocol",
    "build_shift_table",
    "contains",
    "find",
    "new_index",
    "similarity",
]
