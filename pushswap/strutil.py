"""Small string helpers: splitting, trimming, searching and comparing."""

from __future__ import annotations

import string
from itertools import zip_longest

_TRIMMED = " \n\t"
_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def split(s: str, sep: str) -> list[str]:
    """The non-empty pieces of ``s`` between occurrences of the character ``sep``."""
    if len(sep) != 1 or sep == "\0":
        raise ValueError(f"separator must be one non-NUL character: {sep!r}")
    return [word for word in s.split(sep) if word]


def trim(s: str) -> str:
    """``s`` without leading and trailing spaces, newlines and tabs."""
    return s.strip(_TRIMMED)


def find(haystack: str, needle: str) -> int | None:
    """Index of the first occurrence of ``needle`` in ``haystack``, or None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def find_bounded(haystack: str, needle: str, length: int) -> int | None:
    """Like ``find`` but the match must lie within the first ``length`` characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    if not haystack and not needle:
        return 0
    for index in range(min(len(haystack), length + 1)):
        if haystack.startswith(needle, index) and index + len(needle) <= length:
            return index
    return None


def compare(s1: str, s2: str) -> int:
    """Difference of the first differing characters; 0 when the strings are equal."""
    for a, b in zip_longest(s1, s2, fillvalue="\0"):
        if a != b or a == "\0":
            return ord(a) - ord(b)
    return 0


def compare_n(s1: str, s2: str, n: int) -> int:
    """``compare`` limited to the first ``n`` characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return compare(s1[:n], s2[:n])


def upper(s: str) -> str:
    """``s`` with ASCII lower-case letters turned to upper case."""
    return s.translate(_UPPER)