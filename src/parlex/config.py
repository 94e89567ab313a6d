"""ContextVar-based lexer configuration for parlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
Lexers read the active config when they are created.

Thread Safety:
    ContextVars are context-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from parlex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(encoding="latin-1", strict=True)):
        tokens = parlex.tokenize(text)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Note: source_file is intentionally excluded. It names one input,
    so it is passed per call.

    Attributes:
        encoding: Encoding used to turn str input into bytes
        strict: Make ``parlex.tokenize`` raise LexicalError on the first
            lexical error instead of returning it in-band

    """

    encoding: str = "utf-8"
    strict: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from a dictionary.

        Unknown keys are silently ignored.

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
    """Get the lexer configuration for the current context."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set the lexer configuration for the current context."""
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton.
    """
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(strict=True)):
        ...     get_lex_config().strict
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
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
