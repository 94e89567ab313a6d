"""Source location tracking for tokens and lexical errors.

Provides SourceLocation, the span a lexeme occupies in the byte stream.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Span of a lexeme in the input stream.

    Line and column are 1-indexed and count bytes, not characters.
    Offsets are 0-indexed byte positions; ``end_offset`` is exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        offset: Absolute start offset in the stream
        end_offset: Absolute end offset in the stream (exclusive)
        source_file: Name of the input, if known

    Examples:
            >>> loc = SourceLocation(lineno=2, col_offset=5, offset=12, end_offset=15)
            >>> str(loc)
            '2:5'
            >>> loc.length
            3

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "input.sx:1:4" or "1:4"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of bytes covered."""
        return self.end_offset - self.offset

