"""Character-level tokenizer with O(n) single-pass scanning.

Splits text into a flat sequence of string tokens:

- each ASCII punctuation or whitespace character is its own token
- each maximal run of plain characters is one token

Concatenating the tokens in order always reproduces the input.

Thread Safety:
Tokenizer instances hold mutable per-instance state and are not safe for
concurrent use. Create one per thread, or serialize access externally.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from marklex.charsets import classify
from marklex.config import get_tokenizer_config
from marklex.errors import InputTooLargeError, InvalidArgumentError, InvariantViolationError
from marklex.state import StateContainer
from marklex.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class TokenizerState:
    """Mutable state of one Tokenizer.

    Attributes:
        input: Text being tokenized
        buffer: Characters of the current, not yet flushed plain run
        tokens: Output tokens, append-only during a scan
        scanned: True once tokens have been computed for input
    """

    input: str = ""
    buffer: list[str] = field(default_factory=list)
    tokens: list[str] = field(default_factory=list)
    scanned: bool = False


class Tokenizer:
    """Lazy, memoized, restartable character-level tokenizer.

    Usage:
        >>> tokenizer = Tokenizer("hello, world")
        >>> tokenizer.tokens
        ('hello', ',', ' ', 'world')
        >>> tokenizer.change_input("a!b")
        >>> tokenizer.tokens
        ('a', '!', 'b')

    """

    __slots__ = ("_store",)

    def __init__(self, source: str) -> None:
        """Initialize tokenizer over source text. Does not scan.

        Args:
            source: Text to tokenize
        """
        self._store: StateContainer[TokenizerState] = StateContainer(TokenizerState())
        self._store.set_state(input=source)

    @property
    def source(self) -> str:
        """The text currently being tokenized."""
        return self._store.state.input

    @property
    def tokens(self) -> tuple[str, ...]:
        """Token sequence for the current input.

        Scanned on first access and memoized until change_input().

        Raises:
            InputTooLargeError: If the active config limits input length
                and the input exceeds it
            InvariantViolationError: If a classifier rejects a scanned unit
        """
        state = self._store.state
        if not state.scanned:
            self._tokenize()
        return tuple(state.tokens)

    def change_input(self, source: str) -> None:
        """Discard buffer and computed tokens, then switch to new input.

        Args:
            source: New text to tokenize on the next tokens access
        """
        self._store.reset()
        self._store.set_state(input=source)

    def _flush(self, log_flushes: bool) -> None:
        """Join the buffer into one token (if non-empty) and clear it."""
        state = self._store.state
        if not state.buffer:
            return
        word = "".join(state.buffer)
        state.tokens.append(word)
        state.buffer.clear()
        if log_flushes:
            logger.debug("Flushed plain run %r at token %d", word, len(state.tokens) - 1)

    def _tokenize(self) -> None:
        """Scan input once and fill state.tokens.

        Complexity: O(n) where n = len(input)
        """
        config = get_tokenizer_config()
        state = self._store.state
        source = state.input

        limit = config.max_input_length
        if limit is not None and len(source) > limit:
            raise InputTooLargeError(len(source), limit)

        # A failed earlier scan may have left partial output behind
        self._store.set_state(buffer=[], tokens=[])

        log_flushes = config.log_flushes
        tokens = state.tokens
        buffer = state.buffer
        for char in source:
            try:
                char_class = classify(char)
            except InvalidArgumentError as e:
                raise InvariantViolationError(
                    f"Classifier rejected scan unit {char!r}: {e}"
                ) from e

            if char_class.is_special:
                self._flush(log_flushes)
                tokens.append(char)
            else:
                buffer.append(char)

        self._flush(log_flushes)
        self._store.set_state(scanned=True)
        logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        state = self._store.state
        val = state.input
        if len(val) > 20:
            val = val[:17] + "..."
        status = f"{len(state.tokens)} tokens" if state.scanned else "pending"
        return f"Tokenizer({val!r}, {status})"
