"""Pull-based state-machine lexer with one byte of pushback.

Each call to next() runs the scanner from START until one lexeme is
classified. A byte that ends a run without belonging to it is pushed
back and becomes the first byte examined by the following call.

Lexical errors are returned as LexError values, never raised, and
scanning always resumes at the next boundary.

Thread Safety:
Lexer instances are single-use and owned by one consumer.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any

from parlex.config import get_lex_config
from parlex.lexer.charsets import classify
from parlex.lexer.modes import Action, LexerState, transition
from parlex.location import SourceLocation
from parlex.source import as_source
from parlex.tokens import LexError, LexErrorKind, Token, TokenType
from parlex.utils.logger import get_logger

logger = get_logger(__name__)

# Upper bound of the signed 64-bit range; digit runs carry no sign
INT_MAX = 2**63 - 1

# Longest digit run that can still fit after stripping leading zeros
_MAX_INT_DIGITS = len(str(INT_MAX))


class Lexer:
    """State-machine lexer over a pull-based byte source.

    Usage:
            >>> lexer = Lexer("(abc 1.5)")
            >>> for result in lexer:
            ...     print(result)
        Token(LPAREN, '(', 1:1)
        Token(IDENT, 'abc', 1:2)
        Token(FLOAT, '1.5', 1:6)
        Token(RPAREN, ')', 1:9)

    Thread Safety:
        Lexer instances are single-use. Create one per source.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_pushback",  # Byte read but not consumed, or None
        "_exhausted",
        "_offset",
        "_lineno",
        "_col",
    )

    def __init__(
        self,
        source: Any,
        *,
        source_file: str | None = None,
        encoding: str | None = None,
    ) -> None:
        """Initialize lexer over ``source``.

        Args:
            source: Anything ``parlex.source.as_source`` accepts
            source_file: Optional input name for locations and messages
            encoding: Encoding for str input (defaults to the active LexConfig)
        """
        if encoding is None:
            encoding = get_lex_config().encoding
        self._source = as_source(source, encoding)
        self._source_file = source_file
        self._pushback: int | None = None
        self._exhausted = False
        self._offset = 0
        self._lineno = 1
        self._col = 1

    def __iter__(self) -> Iterator[Token | LexError]:
        return self

    def __next__(self) -> Token | LexError:
        result = self.next()
        if result is None:
            raise StopIteration
        return result

    def tokenize(self) -> Iterator[Token | LexError]:
        """Yield every remaining result until end of input."""
        while (result := self.next()) is not None:
            yield result

    @property
    def exhausted(self) -> bool:
        """True once next() has signalled end of input."""
        return self._exhausted

    @property
    def position(self) -> SourceLocation:
        """Location of the next unconsumed byte."""
        return SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._offset,
            source_file=self._source_file,
        )

    def next(self) -> Token | LexError | None:
        """Scan one lexeme.

        Returns:
            The next Token or LexError, or None once input is exhausted.
            After returning None, every later call returns None.
        """
        if self._exhausted:
            return None

        state = LexerState.START
        partial = bytearray()
        start_offset, start_lineno, start_col = self._offset, self._lineno, self._col

        while True:
            byte = self._read()
            if byte is None:
                self._exhausted = True
                if state is LexerState.START:
                    logger.debug("end of input after %d bytes", self._offset)
                    return None
                # End of input is an implicit boundary
                return self._finish(state, partial, start_offset, start_lineno, start_col)

            next_state, action = transition(state, classify(byte))

            if action is Action.BOUNDARY:
                self._unread(byte)
                return self._finish(state, partial, start_offset, start_lineno, start_col)

            self._consume(byte)

            if action is Action.SKIP:
                start_offset, start_lineno, start_col = self._offset, self._lineno, self._col
            elif action is Action.ACCEPT:
                partial.append(byte)
                state = next_state
            elif action is Action.EMIT_LPAREN:
                return self._token(
                    TokenType.LPAREN, "(", None, start_offset, start_lineno, start_col
                )
            elif action is Action.EMIT_RPAREN:
                return self._token(
                    TokenType.RPAREN, ")", None, start_offset, start_lineno, start_col
                )
            else:
                return self._error(
                    LexErrorKind.UNRECOGNIZED_CHARACTER,
                    chr(byte),
                    start_offset,
                    start_lineno,
                    start_col,
                )

    # =========================================================================
    # Byte navigation
    # =========================================================================

    def _read(self) -> int | None:
        """Take the pushed-back byte if there is one, else pull from the source."""
        byte = self._pushback
        if byte is not None:
            self._pushback = None
            return byte
        return self._source.read_byte()

    def _unread(self, byte: int) -> None:
        """Hold ``byte`` for the next scan."""
        assert self._pushback is None, "pushback slot already occupied"
        self._pushback = byte

    def _consume(self, byte: int) -> None:
        """Advance position past ``byte``."""
        self._offset += 1
        if byte == 0x0A:
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

    # =========================================================================
    # Result construction
    # =========================================================================

    def _finish(
        self,
        state: LexerState,
        partial: bytearray,
        start_offset: int,
        start_lineno: int,
        start_col: int,
    ) -> Token | LexError:
        """Emit the pending run for ``state``."""
        text = partial.decode("latin-1")
        location = (start_offset, start_lineno, start_col)

        if state is LexerState.IDENT:
            return self._token(TokenType.IDENT, text, text, *location)

        if state is LexerState.INT:
            digits = text.lstrip("0") or "0"
            if len(digits) > _MAX_INT_DIGITS or int(digits) > INT_MAX:
                return self._error(LexErrorKind.NUMERIC_OVERFLOW, text, *location)
            return self._token(TokenType.INT, text, int(digits), *location)

        if state is LexerState.FLOAT:
            if text == ".":
                return self._error(LexErrorKind.MALFORMED_NUMBER, text, *location)
            value = float(text)
            if not math.isfinite(value):
                return self._error(LexErrorKind.NUMERIC_OVERFLOW, text, *location)
            return self._token(TokenType.FLOAT, text, value, *location)

        return self._error(LexErrorKind.MALFORMED_NUMBER, text, *location)

    def _token(
        self,
        token_type: TokenType,
        text: str,
        value: str | int | float | None,
        start_offset: int,
        start_lineno: int,
        start_col: int,
    ) -> Token:
        return Token(
            type=token_type,
            text=text,
            value=value,
            _lineno=start_lineno,
            _col=start_col,
            _start_offset=start_offset,
            _end_offset=self._offset,
            _source_file=self._source_file,
        )

    def _error(
        self,
        kind: LexErrorKind,
        text: str,
        start_offset: int,
        start_lineno: int,
        start_col: int,
    ) -> LexError:
        error = LexError(
            kind=kind,
            text=text,
            _lineno=start_lineno,
            _col=start_col,
            _start_offset=start_offset,
            _end_offset=self._offset,
            _source_file=self._source_file,
        )
        logger.debug("%s at %s", error.message, error.location)
        return error
