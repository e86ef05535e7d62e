"""ContextVar-based tokenizer configuration for marklex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by every Tokenizer when it scans, so one setting applies to
all tokenizers running in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from marklex.config import TokenizerConfig, tokenizer_config_context

    with tokenizer_config_context(TokenizerConfig(max_input_length=10_000)):
        tokens = Tokenizer(source).tokens

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TokenizerConfig:
    """Immutable tokenizer configuration.

    Attributes:
        max_input_length: Reject inputs longer than this many characters
            (None disables the check)
        log_flushes: Emit a DEBUG log record for every buffer flush

    """

    max_input_length: int | None = None
    log_flushes: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TokenizerConfig":
        """Create TokenizerConfig from dictionary.

        Only includes keys that are valid TokenizerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TokenizerConfig attribute names.

        Returns:
            New TokenizerConfig instance with values from dict.

        Example:
            >>> config = TokenizerConfig.from_dict({
            ...     "log_flushes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.log_flushes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizerConfig = TokenizerConfig()

_tokenizer_config: ContextVar[TokenizerConfig] = ContextVar(
    "tokenizer_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenizer_config() -> TokenizerConfig:
    """Get current tokenizer configuration (thread-local)."""
    return _tokenizer_config.get()


def set_tokenizer_config(config: TokenizerConfig) -> None:
    """Set tokenizer configuration for current context.

    Args:
        config: TokenizerConfig instance to use for this context.

    """
    _tokenizer_config.set(config)


def reset_tokenizer_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _tokenizer_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenizer_config_context(config: TokenizerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TokenizerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with tokenizer_config_context(TokenizerConfig(log_flushes=True)):
        ...     Tokenizer("a b").tokens
        ('a', ' ', 'b')

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _tokenizer_config.get()
    _tokenizer_config.set(config)
    try:
        yield
    finally:
        _tokenizer_config.set(previous)


__all__ = [
    "TokenizerConfig",
    "get_tokenizer_config",
    "set_tokenizer_config",
    "reset_tokenizer_config",
    "tokenizer_config_context",
]
