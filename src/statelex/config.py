"""ContextVar-based lexer configuration for statelex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction, unless one is
passed explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from statelex.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(encoding="latin-1")):
        lexer = Lexer(stream, start_state)
        lexer.scan(print)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        encoding: Codec used to decode the byte stream into code points
        decode_errors: Decoder error policy ("replace", "strict", "ignore", ...)
        trace_states: Log every state transition at debug level

    """

    encoding: str = "utf-8"
    decode_errors: str = "replace"
    trace_states: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexerConfig attribute names.

        Returns:
            New LexerConfig instance with values from dict.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "encoding": "latin-1",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'latin-1'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local)."""
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lexer_config_context(LexerConfig(trace_states=True)):
        ...     lexer = Lexer.from_string("123", number_state)
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
