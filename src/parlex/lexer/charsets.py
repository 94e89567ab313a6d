"""Character classes for O(1) byte classification.

All sets are frozensets of byte values (ints) for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII bytes belong to a named class. Every byte >= 0x80, and every
ASCII byte not listed here, is OTHER.

Usage:
    from parlex.lexer.charsets import CharClass, classify

    if classify(byte) is CharClass.DIGIT:
        ...
"""

from __future__ import annotations

from enum import Enum, auto

WHITESPACE: frozenset[int] = frozenset(b" \t\n\r")

DIGITS: frozenset[int] = frozenset(b"0123456789")

LETTERS: frozenset[int] = frozenset(
    b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

LPAREN = ord("(")
RPAREN = ord(")")
UNDERSCORE = ord("_")
DOT = ord(".")


class CharClass(Enum):
    """Input classes the state machine distinguishes."""

    WHITESPACE = auto()
    LPAREN = auto()
    RPAREN = auto()
    LETTER = auto()
    UNDERSCORE = auto()  # Separate from LETTER: it ends a number instead of spoiling it
    DIGIT = auto()
    DOT = auto()
    OTHER = auto()


def _build_class_table() -> tuple[CharClass, ...]:
    table = [CharClass.OTHER] * 256
    for byte in WHITESPACE:
        table[byte] = CharClass.WHITESPACE
    for byte in LETTERS:
        table[byte] = CharClass.LETTER
    for byte in DIGITS:
        table[byte] = CharClass.DIGIT
    table[LPAREN] = CharClass.LPAREN
    table[RPAREN] = CharClass.RPAREN
    table[UNDERSCORE] = CharClass.UNDERSCORE
    table[DOT] = CharClass.DOT
    return tuple(table)


_CLASS_TABLE: tuple[CharClass, ...] = _build_class_table()


def classify(byte: int) -> CharClass:
    """Return the character class of ``byte`` (0-255)."""
    return _CLASS_TABLE[byte]
