"""Reading a stream one line at a time.

The stream may be text or binary; lines come back as the same type the
stream's ``read`` returns. Each line keeps its newline, except possibly the
last one.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Tuple, Union

__all__ = ["LineReader", "BUFFER_SIZE"]

BUFFER_SIZE = 4096

Chunk = Union[str, bytes]


def _split_line(data: Chunk) -> Optional[Tuple[Chunk, Optional[Chunk]]]:
    """Split off the first complete line.

    Returns None when ``data`` holds no newline, otherwise the line with its
    newline and the remainder (None when nothing remains).
    """
    newline = "\n" if isinstance(data, str) else b"\n"
    end = data.find(newline)
    if end < 0:
        return None
    rest = data[end + 1:]
    return data[: end + 1], (rest or None)


class LineReader:
    """Reads lines from a stream in chunks of ``buffer_size``."""

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    def next_line(self) -> Optional[Chunk]:
        """The next line, or None once the stream is exhausted.

        If reading fails, any text held back is discarded and the error
        propagates.
        """
        pending = self._pending
        self._pending = None
        while True:
            if pending is not None:
                parts = _split_line(pending)
                if parts is not None:
                    line, self._pending = parts
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                return pending or None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[Chunk]:
        return self

    def __next__(self) -> Chunk:
        line = self.next_line()
        if line is None:
            raise StopIteration
        return line