"""Tests for single-character classification."""

import pytest

from marklex.charsets import (
    ASCII_PUNCTUATION,
    WHITESPACE,
    CharClass,
    classify,
    is_ascii_punctuation,
    is_whitespace,
)
from marklex.errors import InvalidArgumentError, MarklexError


class TestIsAsciiPunctuation:
    """Range boundaries for ASCII punctuation."""

    @pytest.mark.parametrize("char", ["!", "/", ":", "@", "[", "`", "{", "~", "\\", "_"])
    def test_punctuation(self, char: str) -> None:
        assert is_ascii_punctuation(char) is True

    @pytest.mark.parametrize("char", ["a", "Z", "0", "9", " ", "\x7f", "¡", "—"])
    def test_not_punctuation(self, char: str) -> None:
        assert is_ascii_punctuation(char) is False

    def test_range_edges(self) -> None:
        # Code points just outside each range
        for cp in (32, 48, 57, 65, 90, 97, 122, 127):
            assert is_ascii_punctuation(chr(cp)) is False

    def test_set_matches_predicate(self) -> None:
        assert ASCII_PUNCTUATION == {chr(cp) for cp in range(128) if is_ascii_punctuation(chr(cp))}
        assert len(ASCII_PUNCTUATION) == 32


class TestIsWhitespace:
    """Space and the 9-13 control range."""

    @pytest.mark.parametrize("cp", [9, 10, 11, 12, 13, 32])
    def test_whitespace(self, cp: int) -> None:
        assert is_whitespace(chr(cp)) is True

    @pytest.mark.parametrize("char", ["a", "1", "!", "\x08", "\x0e", "\u00a0", "\u2003"])
    def test_not_whitespace(self, char: str) -> None:
        assert is_whitespace(char) is False

    def test_set_contents(self) -> None:
        assert WHITESPACE == frozenset(" \t\n\v\f\r")


class TestClassify:
    def test_classes(self) -> None:
        assert classify("*") is CharClass.PUNCTUATION
        assert classify("\n") is CharClass.WHITESPACE
        assert classify("x") is CharClass.PLAIN

    def test_is_special(self) -> None:
        assert CharClass.PUNCTUATION.is_special
        assert CharClass.WHITESPACE.is_special
        assert not CharClass.PLAIN.is_special

    def test_sets_disjoint(self) -> None:
        assert not (ASCII_PUNCTUATION & WHITESPACE)


class TestSingleCharacterPrecondition:
    """Classifiers reject anything but exactly one character."""

    @pytest.mark.parametrize("func", [is_ascii_punctuation, is_whitespace, classify])
    def test_empty(self, func) -> None:
        with pytest.raises(InvalidArgumentError, match="received 0") as exc_info:
            func("")
        assert exc_info.value.received == 0

    @pytest.mark.parametrize("func", [is_ascii_punctuation, is_whitespace, classify])
    def test_multiple(self, func) -> None:
        with pytest.raises(InvalidArgumentError, match="received 2") as exc_info:
            func("ab")
        assert exc_info.value.argument == "char"

    def test_error_hierarchy(self) -> None:
        with pytest.raises(ValueError):
            is_whitespace("  ")
        with pytest.raises(MarklexError):
            is_ascii_punctuation("!!")

    def test_astral_character_is_single(self) -> None:
        assert is_ascii_punctuation("\U0001f600") is False
        assert is_whitespace("\U0001f600") is False
