"""Reading a source one line at a time through a fixed-size buffer."""

from __future__ import annotations

import codecs
import os
from collections.abc import Iterator
from typing import IO, Union

BUFFER_SIZE = 42
OPEN_MAX = 10240

Source = Union[int, IO[str], IO[bytes]]


class LineReader:
    """Hands out the lines of a file descriptor or stream one at a time.

    Each line keeps its trailing newline; the last line may lack one.
    ``next_line`` returns None once the input is used up, on a read error,
    or when the buffer size is not positive. Bytes are decoded as UTF-8.
    """

    def __init__(self, source: Source, buffer_size: int = BUFFER_SIZE) -> None:
        self._source = source
        self.buffer_size = buffer_size
        self._pending = ""
        self._eof = False
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def _read_chunk(self) -> tuple[str, bool]:
        if isinstance(self._source, int):
            data = os.read(self._source, self.buffer_size)
        else:
            data = self._source.read(self.buffer_size)
        if data is None:
            return "", True
        if isinstance(data, (bytes, bytearray)):
            at_end = not data
            return self._decoder.decode(bytes(data), final=at_end), at_end
        return data, not data

    def next_line(self) -> str | None:
        """Return the next line, or None when there is none."""
        if self.buffer_size <= 0:
            return None
        if isinstance(self._source, int) and self._source < 0:
            return None
        while True:
            cut = self._pending.find("\n")
            if cut >= 0:
                line = self._pending[: cut + 1]
                self._pending = self._pending[cut + 1 :]
                return line
            if self._eof:
                break
            try:
                text, self._eof = self._read_chunk()
            except OSError:
                self._pending = ""
                self._eof = True
                return None
            self._pending += text
        line, self._pending = self._pending, ""
        return line or None

    def __iter__(self) -> Iterator[str]:
        while (line := self.next_line()) is not None:
            yield line


class LineReaderPool:
    """Keeps a separate reader for each file descriptor."""

    def __init__(self, buffer_size: int = BUFFER_SIZE, open_max: int = OPEN_MAX) -> None:
        self.buffer_size = buffer_size
        self.open_max = open_max
        self._readers: dict[int, LineReader] = {}

    def next_line(self, fd: int) -> str | None:
        """Return the next line of ``fd``, or None when there is none."""
        if fd < 0 or fd > self.open_max:
            return None
        reader = self._readers.get(fd)
        if reader is None:
            reader = self._readers[fd] = LineReader(fd, self.buffer_size)
        return reader.next_line()