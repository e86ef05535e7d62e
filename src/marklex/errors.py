"""Exception classes for marklex.

Provides standardized exceptions for error handling throughout marklex.
"""

from __future__ import annotations


class MarklexError(Exception):
    """Base exception for all marklex errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(MarklexError, ValueError):
    """An argument is outside the domain a function accepts.

    Raised by the character classifiers when they receive anything other
    than exactly one character, and by the utilities that validate their
    bounds or field names.
    """

    def __init__(self, argument: str, message: str, received: object = None) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending parameter (e.g., "char")
            message: Description of what was expected
            received: The value (or measurement of it) that was received
        """
        self.argument = argument
        self.received = received
        super().__init__(f"Invalid argument '{argument}': {message}")


class InvariantViolationError(MarklexError, RuntimeError):
    """Internal logic error.

    Raised when the tokenizer hands a malformed unit to a classifier.
    Never caused by user input; indicates a bug in marklex itself.
    """

    pass


class InputTooLargeError(MarklexError):
    """Input exceeds the configured ``max_input_length``."""

    def __init__(self, length: int, limit: int) -> None:
        """Initialize input size error.

        Args:
            length: Length of the rejected input in characters
            limit: The configured maximum
        """
        self.length = length
        self.limit = limit
        super().__init__(f"Input of {length} characters exceeds limit of {limit}")
