"""Two-stage title matching: substring prefilter and similarity scoring.

The prefilter is a Boyer-Moore-Horspool scan over the lowercased UTF-8 bytes
of both strings. It runs in sub-linear expected time, so clearly irrelevant
titles are rejected before the Jaro-Winkler score is computed.

Smart Defaults:
- Empty or whitespace-only needles match every title (offset 0)
- Needles longer than the haystack never match
- Lone surrogates are encoded as-is instead of failing
- Scoring is case-sensitive; only the prefilter folds case
- Shared-prefix boost applies once Jaro similarity reaches 0.7
- At most 4 leading characters are rewarded by the boost
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import Jaro

from title_index.errors import EmptyTitleError


NO_MATCH = -1
ALPHABET_SIZE = 256

DEFAULT_BOOST_THRESHOLD = 0.7
DEFAULT_PREFIX_SIZE = 4
PREFIX_SCALE = 0.1


def _fold(text: str) -> bytes:
    # surrogatepass keeps titles decoded with surrogateescape searchable
    return text.lower().encode("utf-8", errors="surrogatepass")


def build_shift_table(pattern: bytes) -> list[int]:
    """Build the bad-character shift table for a pattern.

    Every byte value starts at the pattern length. Bytes that occur in the
    pattern (except at the last position) shift by their distance from the end.

    Examples:
        >>> table = build_shift_table(b"abc")
        >>> table[ord("a")], table[ord("b")], table[ord("c")], table[ord("z")]
        (2, 1, 3, 3)
    """
    m = len(pattern)
    table = [m] * ALPHABET_SIZE
    for i in range(m - 1):
        table[pattern[i]] = m - i - 1
    return table


@dataclass(frozen=True, slots=True)
class Needle:
    """A query folded and prepared once, then scanned against many titles."""

    pattern: bytes
    table: tuple[int, ...]

    @classmethod
    def compile(cls, needle: str) -> Needle:
        if not needle or not needle.strip():
            return cls(pattern=b"", table=())
        pattern = _fold(needle)
        return cls(pattern=pattern, table=tuple(build_shift_table(pattern)))

    @property
    def blank(self) -> bool:
        return not self.pattern

    def find(self, haystack: str) -> int:
        """Byte offset of the first match in the folded haystack, or NO_MATCH."""
        if self.blank:
            return 0

        text = _fold(haystack)
        pattern, table = self.pattern, self.table
        n, m = len(text), len(pattern)

        s = 0
        while s <= n - m:
            j = m - 1
            while j >= 0 and pattern[j] == text[s + j]:
                j -= 1
            if j < 0:
                return s
            s += table[text[s + m - 1]]

        return NO_MATCH

    def matches(self, haystack: str) -> bool:
        return self.find(haystack) != NO_MATCH


def find(haystack: str, needle: str) -> int:
    """Return the byte offset of the first case-insensitive occurrence of needle.

    Args:
        haystack: Text to scan.
        needle: Pattern to look for.

    Returns:
        Start offset into the lowercased UTF-8 encoding of haystack, 0 for an
        empty or whitespace-only needle, or NO_MATCH when absent.

    Examples:
        >>> find("Another Movie", "movie")
        8
        >>> find("Documentary", "movie")
        -1
        >>> find("anything", "   ")
        0
    """
    return Needle.compile(needle).find(haystack)


def contains(haystack: str, needle: str) -> bool:
    """Case-insensitive substring test; blank needles match everything."""
    return Needle.compile(needle).matches(haystack)


def _common_prefix(a: str, b: str, limit: int) -> int:
    count = 0
    for left, right in zip(a[:limit], b[:limit]):
        if left != right:
            break
        count += 1
    return count


def similarity(
    haystack: str,
    needle: str,
    *,
    boost_threshold: float = DEFAULT_BOOST_THRESHOLD,
    prefix_size: int = DEFAULT_PREFIX_SIZE,
) -> float:
    """Jaro-Winkler similarity between a title and a query.

    Strings are compared as given, so "Movie" and "movie" differ in their
    first character.

    Args:
        haystack: Stored title. Must be non-empty.
        needle: Query text.
        boost_threshold: Jaro similarity at or above which the shared-prefix
            boost is applied.
        prefix_size: Maximum number of leading characters rewarded.

    Returns:
        Score in [0, 1]; 1.0 means identical.

    Raises:
        EmptyTitleError: haystack is empty.
        ValueError: boost_threshold or prefix_size out of range.
    """
    if not haystack:
        raise EmptyTitleError()
    if not 0.0 <= boost_threshold <= 1.0:
        raise ValueError(f"boost_threshold must be within [0, 1], got {boost_threshold}")
    if prefix_size < 0:
        raise ValueError(f"prefix_size must be >= 0, got {prefix_size}")

    score = Jaro.similarity(needle, haystack)
    if score < boost_threshold:
        return score

    prefix = _common_prefix(needle, haystack, prefix_size)
    return min(1.0, score + PREFIX_SCALE * prefix * (1.0 - score))
