"""Token and LexError definitions for the parlex lexer.

The lexer produces a stream of results, each either a Token or a LexError.
Both carry the exact lexeme text and raw source coordinates.

Lexeme text maps bytes to characters one-to-one (Latin-1), so
``result.text.encode("latin-1")`` gives back the original bytes.

Thread Safety:
Token and LexError are frozen (immutable) and safe to share across threads.

Performance Note:
Results store raw coordinates and create SourceLocation lazily.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer."""

    LPAREN = auto()  # (
    RPAREN = auto()  # )
    IDENT = auto()  # letter or _ followed by letters, digits, _
    INT = auto()  # 123
    FLOAT = auto()  # 1.5, 1., .5


class LexErrorKind(Enum):
    """Categories of malformed input.

    - UNRECOGNIZED_CHARACTER: a byte that cannot start any token
    - MALFORMED_NUMBER: digits followed by a letter, a second decimal point,
      or a decimal point with no digits
    - NUMERIC_OVERFLOW: a well-formed number outside the representable range

    """

    UNRECOGNIZED_CHARACTER = auto()
    MALFORMED_NUMBER = auto()
    NUMERIC_OVERFLOW = auto()


class _Located:
    """Lazy location support shared by Token and LexError."""

    __slots__ = ()

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        from parlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def raw(self) -> bytes:
        """The lexeme as it appeared in the byte stream."""
        return self.text.encode("latin-1")


@dataclass(frozen=True, slots=True)
class Token(_Located):
    """A successfully classified lexeme.

    Attributes:
        type: The token type
        text: The lexeme exactly as read
        value: Parsed value: None for parentheses, str for identifiers,
            int for integers, float for floats
        _lineno: Start line number (1-indexed)
        _col: Start column (1-indexed)
        _start_offset: Absolute start offset in the stream
        _end_offset: Absolute end offset in the stream (exclusive)
        _source_file: Optional input name

    """

    type: TokenType
    text: str
    value: str | int | float | None = None
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"Token({self.type.name}, {self.text!r}, {self._lineno}:{self._col})"


@dataclass(frozen=True, slots=True)
class LexError(_Located):
    """Malformed input, reported in-band as a value.

    ``text`` is the whole offending run: a single byte for an unrecognized
    character, otherwise everything accumulated up to the boundary.

    """

    kind: LexErrorKind
    text: str
    _lineno: int = 1
    _col: int = 1
    _start_offset: int = 0
    _end_offset: int = 0
    _source_file: str | None = None
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def message(self) -> str:
        """Human-readable description of the error."""
        if self.kind is LexErrorKind.UNRECOGNIZED_CHARACTER:
            return f"unrecognized character {self.text!r}"
        if self.kind is LexErrorKind.NUMERIC_OVERFLOW:
            return f"numeric literal out of range {self.text!r}"
        return f"malformed numeric literal {self.text!r}"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        return f"LexError({self.kind.name}, {self.text!r}, {self._lineno}:{self._col})"


LexResult = Token | LexError
