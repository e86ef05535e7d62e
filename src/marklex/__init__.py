"""
marklex — Character-level lexer for Markdown-style pipelines

Splits text into a flat token sequence: every ASCII punctuation and
whitespace character becomes its own token, and each run of plain
characters becomes one word token. Zero runtime dependencies.

Quick Start:
    >>> from marklex import tokenize
    >>> tokenize("hello world")
    ('hello', ' ', 'world')

    >>> # Or reuse one Tokenizer across inputs
    >>> from marklex import Tokenizer
    >>> tokenizer = Tokenizer("a,b")
    >>> tokenizer.tokens
    ('a', ',', 'b')
    >>> tokenizer.change_input("foo!!bar")
    >>> tokenizer.tokens
    ('foo', '!', '!', 'bar')

Installation:
    pip install marklex
"""

from marklex.charsets import (
    ASCII_PUNCTUATION,
    WHITESPACE,
    CharClass,
    classify,
    is_ascii_punctuation,
    is_whitespace,
)
from marklex.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from marklex.errors import (
    InputTooLargeError,
    InvalidArgumentError,
    InvariantViolationError,
    MarklexError,
)
from marklex.lexer import Tokenizer, TokenizerState
from marklex.state import StateContainer
from marklex.utils.merge import merge

__version__ = "0.1.0"


def tokenize(source: str) -> tuple[str, ...]:
    """Tokenize source text in one call.

    Args:
        source: Text to tokenize

    Returns:
        Token tuple; joining it reproduces source

    Example:
        >>> tokenize("a,b")
        ('a', ',', 'b')
    """
    return Tokenizer(source).tokens


__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "tokenize",
    "Tokenizer",
    "TokenizerState",
    # Classification
    "ASCII_PUNCTUATION",
    "WHITESPACE",
    "CharClass",
    "classify",
    "is_ascii_punctuation",
    "is_whitespace",
    # State
    "StateContainer",
    "merge",
    # Configuration (ContextVar-based)
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
    # Errors
    "MarklexError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "InputTooLargeError",
]
