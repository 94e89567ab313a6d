"""Protocols for parlex.

Defines the contract the lexer expects from its input.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Pull-based producer of bytes.

    The lexer never asks a source to rewind; all pushback is internal
    to the lexer. Once ``read_byte`` returns None it must keep doing so.

    Thread Safety:
        A source is owned by exactly one lexer. No locking is expected.

    """

    def read_byte(self) -> int | None:
        """Return the next byte (0-255), or None at end of input."""
        ...
