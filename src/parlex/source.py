"""Byte source adapters.

Wraps in-memory text, byte buffers, binary streams, and arbitrary
iterables of ints so they all satisfy the ByteSource protocol.

Usage:
    >>> src = as_source("(a b)")
    >>> src.read_byte()
    40

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, BinaryIO

from parlex.errors import SourceError
from parlex.protocols import ByteSource


class BytesSource:
    """Source over an in-memory byte buffer."""

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        self._data = bytes(data)
        self._pos = 0

    def read_byte(self) -> int | None:
        if self._pos >= len(self._data):
            return None
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    @classmethod
    def from_str(cls, text: str, encoding: str = "utf-8") -> BytesSource:
        """Encode ``text`` and wrap the result."""
        return cls(text.encode(encoding))


class StreamSource:
    """Source over a binary file-like object, read one byte at a time.

    Reads block only as long as the underlying stream blocks. I/O errors
    from the stream propagate to the caller.
    """

    __slots__ = ("_stream", "_done")

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._done = False

    def read_byte(self) -> int | None:
        if self._done:
            return None
        chunk = self._stream.read(1)
        if not chunk:
            self._done = True
            return None
        if isinstance(chunk, str):
            raise SourceError(
                f"stream {self._stream!r} returned text; open it in binary mode"
            )
        return chunk[0]


class IterSource:
    """Source over any iterable of byte values."""

    __slots__ = ("_it", "_done")

    def __init__(self, iterable: Iterable[int]) -> None:
        self._it: Iterator[int] = iter(iterable)
        self._done = False

    def read_byte(self) -> int | None:
        if self._done:
            return None
        try:
            byte = next(self._it)
        except StopIteration:
            self._done = True
            return None
        if not isinstance(byte, int) or isinstance(byte, bool) or not 0 <= byte <= 255:
            raise SourceError(f"expected a byte value in 0..255, got {byte!r}")
        return byte


def as_source(obj: Any, encoding: str = "utf-8") -> ByteSource:
    """Adapt ``obj`` to a ByteSource.

    Args:
        obj: str, bytes-like object, binary (or text, via ``.buffer``) stream,
            iterable of ints, or an existing ByteSource
        encoding: Encoding used for str input

    Returns:
        A ByteSource reading ``obj`` from its start

    Raises:
        SourceError: If ``obj`` cannot be read as bytes
    """
    if isinstance(obj, ByteSource):
        return obj
    if isinstance(obj, str):
        return BytesSource.from_str(obj, encoding)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return BytesSource(obj)
    if hasattr(obj, "read"):
        # Text streams such as sys.stdin expose their binary layer as .buffer
        return StreamSource(getattr(obj, "buffer", obj))
    if isinstance(obj, Iterable):
        return IterSource(obj)
    raise SourceError(f"cannot read bytes from {type(obj).__name__}")


__all__ = ["BytesSource", "IterSource", "StreamSource", "as_source"]
