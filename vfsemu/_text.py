"""TextHandle: text I/O over a binary :class:`FileHandle`.

Used instead of ``io.TextIOWrapper``, which expects ``readinto()`` based
raw streams and keeps its own buffer on top of the handle's buffer.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ._handle import FileHandle


class TextHandle:
    """Encode/decode wrapper around an open :class:`FileHandle`.

    Parameters
    ----------
    handle:
        Binary handle obtained from ``VirtualFileSystem.open()``.
    encoding:
        Text encoding (default ``"utf-8"``).
    errors:
        Encode/decode error handling (default ``"strict"``).

    Closing the text handle closes the underlying handle.

    Example
    -------
    >>> with TextHandle(vfs.open("/notes.txt", FileMode.CREATE)) as th:
    ...     th.write("first line\\n")
    """

    def __init__(
        self,
        handle: FileHandle,
        encoding: str = "utf-8",
        errors: str = "strict",
    ) -> None:
        self._handle = handle
        self._encoding = encoding
        self._errors = errors

    @property
    def encoding(self) -> str:
        return self._encoding

    @property
    def errors(self) -> str:
        return self._errors

    @property
    def handle(self) -> FileHandle:
        return self._handle

    def write(self, text: str) -> int:
        """Encode *text* into the handle; returns the number of characters."""
        self._handle.write(text.encode(self._encoding, self._errors))
        return len(text)

    def writelines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def read(self) -> str:
        """Decode everything from the cursor to the end of the buffer."""
        return self._handle.read().decode(self._encoding, self._errors)

    def readline(self) -> str:
        """Read one line, keeping its ``\\n`` or ``\\r\\n`` terminator."""
        line = bytearray()
        while True:
            b = self._handle.read(1)
            if not b:
                break
            line.extend(b)
            if b == b"\n":
                break
        return line.decode(self._encoding, self._errors)

    def readlines(self) -> list[str]:
        return list(self)

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.readline()
        if not line:
            raise StopIteration
        return line

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> TextHandle:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
