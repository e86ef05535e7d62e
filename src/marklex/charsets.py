"""Character classification for the tokenizer.

Every character falls in exactly one class:

- ASCII punctuation: ``!"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~``
- whitespace: space, tab, LF, vertical tab, form feed, CR
- plain: everything else (letters, digits, non-ASCII text)

The two special classes are defined by inclusive code-point ranges, so they
are disjoint by construction.

Reference: GitHub Flavored Markdown spec
https://github.github.com/gfm/#ascii-punctuation-character
https://github.github.com/gfm/#whitespace-character

Usage:
    from marklex.charsets import classify, CharClass

    if classify(char) is CharClass.PLAIN:
        ...
"""

from __future__ import annotations

from enum import Enum, auto

from marklex.errors import InvalidArgumentError
from marklex.utils.ranges import is_in_range

# Inclusive (low, high) code-point ranges
ASCII_PUNCTUATION_RANGES: tuple[tuple[int, int], ...] = (
    (33, 47),  # !"#$%&'()*+,-./
    (58, 64),  # :;<=>?@
    (91, 96),  # [\]^_`
    (123, 126),  # {|}~
)

WHITESPACE_RANGES: tuple[tuple[int, int], ...] = (
    (9, 13),  # \t \n \v \f \r
    (32, 32),  # space
)


def _expand(ranges: tuple[tuple[int, int], ...]) -> frozenset[str]:
    return frozenset(chr(cp) for low, high in ranges for cp in range(low, high + 1))


# O(1) membership sets for callers that only need a lookup
ASCII_PUNCTUATION: frozenset[str] = _expand(ASCII_PUNCTUATION_RANGES)
WHITESPACE: frozenset[str] = _expand(WHITESPACE_RANGES)


class CharClass(Enum):
    """Classification of a single character."""

    PUNCTUATION = auto()
    WHITESPACE = auto()
    PLAIN = auto()

    @property
    def is_special(self) -> bool:
        """True for classes that always form a token of their own."""
        return self is not CharClass.PLAIN


def _code_point(char: str) -> int:
    """Return the code point of a single character.

    Raises:
        InvalidArgumentError: If ``char`` is not exactly one character long
    """
    if len(char) != 1:
        raise InvalidArgumentError(
            "char",
            f"expected exactly 1 character, received {len(char)}",
            received=len(char),
        )
    return ord(char)


def _in_ranges(code_point: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    for low, high in ranges:
        if low == high:
            if code_point == low:
                return True
        elif is_in_range(code_point, low, high, include_low=True, include_high=True):
            return True
    return False


def is_ascii_punctuation(char: str) -> bool:
    """Check if character is ASCII punctuation.

    Args:
        char: A single character

    Returns:
        True if the code point is in [33,47], [58,64], [91,96] or [123,126]

    Raises:
        InvalidArgumentError: If ``char`` is empty or longer than one character
    """
    return _in_ranges(_code_point(char), ASCII_PUNCTUATION_RANGES)


def is_whitespace(char: str) -> bool:
    """Check if character is whitespace (space or code points 9-13).

    Args:
        char: A single character

    Returns:
        True for space, tab, LF, vertical tab, form feed or CR

    Raises:
        InvalidArgumentError: If ``char`` is empty or longer than one character
    """
    return _in_ranges(_code_point(char), WHITESPACE_RANGES)


def classify(char: str) -> CharClass:
    """Classify a single character.

    Raises:
        InvalidArgumentError: If ``char`` is empty or longer than one character
    """
    if is_ascii_punctuation(char):
        return CharClass.PUNCTUATION
    if is_whitespace(char):
        return CharClass.WHITESPACE
    return CharClass.PLAIN


__all__ = [
    "ASCII_PUNCTUATION",
    "ASCII_PUNCTUATION_RANGES",
    "CharClass",
    "WHITESPACE",
    "WHITESPACE_RANGES",
    "classify",
    "is_ascii_punctuation",
    "is_whitespace",
]
