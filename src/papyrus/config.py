"""ContextVar-based lexer configuration for Papyrus.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from papyrus.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict_brackets=True)):
        tokens = tokenize("[user:5")  # unterminated tag is now an error

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# Largest identifier accepted by default (unsigned 64-bit)
DEFAULT_MAX_ID = 2**64 - 1


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        max_id: Largest tag identifier accepted; larger captures raise
            CaptureParseError instead of being clamped
        strict_brackets: Treat a tag missing its closing ``]`` as an error
            instead of classifying whatever text remains

    """

    max_id: int = DEFAULT_MAX_ID
    strict_brackets: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = LexConfig.from_dict({"strict_brackets": True, "x": 1})
            >>> config.strict_brackets
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
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

    Only affects the current thread's context.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(max_id=100)):
        ...     lexer = Lexer("[user:101]")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "DEFAULT_MAX_ID",
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
