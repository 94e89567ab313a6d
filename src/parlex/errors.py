"""Exception classes for parlex.

Malformed input is never raised: the lexer reports it in-band as a
LexError value. These exceptions cover caller misuse, unusable sources,
and strict-mode consumers that choose to treat a LexError as fatal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parlex.tokens import LexError


class ParlexError(Exception):
    """Base exception for all parlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexicalError(ParlexError):
    """A lexical error promoted to an exception.

    Raised by strict consumers (``parlex.tokenize(..., strict=True)``),
    never by the lexer itself.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
        error: LexError | None = None,
    ) -> None:
        """Initialize lexical error with optional location.

        Args:
            message: Error description
            lineno: Line number where the lexeme starts (1-indexed)
            col_offset: Column where the lexeme starts (1-indexed)
            source_file: Name of the input (optional)
            error: The LexError value being promoted (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        self.error = error

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")

    @classmethod
    def from_lex_error(cls, error: LexError) -> LexicalError:
        """Build an exception carrying the LexError and its location."""
        return cls(
            error.message,
            lineno=error.lineno,
            col_offset=error.col,
            source_file=error.location.source_file,
            error=error,
        )


class SourceError(ParlexError, TypeError):
    """Error when an object cannot be used as a byte source.

    Raised when adapting an unsupported object, or when an iterable
    source yields something that is not a byte value.
    """

    pass
