"""Character-level lexer for marklex.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, TokenizerState
└── core.py              # Tokenizer class (scan, memoization, reset)

Character classification lives in marklex.charsets; per-instance state is
held in a marklex.state.StateContainer.

Usage:
    >>> from marklex.lexer import Tokenizer
    >>> Tokenizer("foo!!bar").tokens
    ('foo', '!', '!', 'bar')

"""

from marklex.lexer.core import Tokenizer, TokenizerState

__all__ = ["Tokenizer", "TokenizerState"]
