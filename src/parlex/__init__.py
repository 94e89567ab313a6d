"""
parlex — lexer for a minimal parenthesized language

Turns a byte stream into parentheses, identifiers, integers, and floats.
Malformed input is reported in-band as LexError values, so a single bad
lexeme never stops the scan.

Quick Start:
    >>> from parlex import tokenize
    >>> for result in tokenize("(add 1 2.5 =)"):
    ...     print(result)
    Token(LPAREN, '(', 1:1)
    Token(IDENT, 'add', 1:2)
    Token(INT, '1', 1:6)
    Token(FLOAT, '2.5', 1:8)
    LexError(UNRECOGNIZED_CHARACTER, '=', 1:12)
    Token(RPAREN, ')', 1:13)

    >>> # Pull one result at a time
    >>> from parlex import Lexer
    >>> lexer = Lexer(b"x")
    >>> lexer.next(), lexer.next()
    (Token(IDENT, 'x', 1:1), None)

Installation:
    pip install parlex              # zero runtime dependencies
"""

from collections.abc import Iterator
from typing import Any

from parlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from parlex.errors import LexicalError, ParlexError, SourceError
from parlex.lexer import Lexer
from parlex.location import SourceLocation
from parlex.protocols import ByteSource
from parlex.source import BytesSource, IterSource, StreamSource, as_source
from parlex.tokens import LexError, LexErrorKind, LexResult, Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: Any,
    *,
    source_file: str | None = None,
    strict: bool | None = None,
) -> Iterator[Token | LexError]:
    """Lex ``source`` lazily.

    Args:
        source: str, bytes-like object, binary stream, iterable of ints,
            or ByteSource
        source_file: Optional input name for locations and messages
        strict: Raise LexicalError on the first LexError instead of
            yielding it (defaults to the active LexConfig)

    Yields:
        Token and LexError values in input order

    Raises:
        LexicalError: In strict mode, on the first malformed lexeme
    """
    config = get_lex_config()
    if strict is None:
        strict = config.strict

    for result in Lexer(source, source_file=source_file, encoding=config.encoding):
        if strict and isinstance(result, LexError):
            raise LexicalError.from_lex_error(result)
        yield result


__all__ = [
    # Main API
    "tokenize",
    "Lexer",
    "__version__",
    # Results
    "Token",
    "TokenType",
    "LexError",
    "LexErrorKind",
    "LexResult",
    "SourceLocation",
    # Sources
    "ByteSource",
    "BytesSource",
    "IterSource",
    "StreamSource",
    "as_source",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "ParlexError",
    "LexicalError",
    "SourceError",
]
