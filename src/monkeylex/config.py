"""ContextVar-based lexer configuration for monkeylex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from monkeylex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict=True)):
        tokens = list(Lexer(source).tokenize())  # raises on ILLEGAL

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    The keyword table is deliberately not part of the config; it is fixed.

    Attributes:
        strict: Raise IllegalTokenError from tokenize() on the first
            ILLEGAL token instead of yielding it. next_token() is unaffected.
        trace: Log every emitted token and skipped whitespace character
            at DEBUG level.

    """

    strict: bool = False
    trace: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> LexConfig:
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> LexConfig.from_dict({"strict": True, "colour": "red"}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the module-level default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Args:
        config: LexConfig to use within the context.

    Example:
        >>> with lex_config_context(LexConfig(trace=True)):
        ...     get_lex_config().trace
        True

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
