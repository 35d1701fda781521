"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

__all__ = ["LineReader", "read_lines", "DEFAULT_BUFFER_SIZE"]

DEFAULT_BUFFER_SIZE = 42


def _newline(chunk: AnyStr) -> AnyStr:
    return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[return-value]


class LineReader(Generic[AnyStr]):
    """Return lines of a text or binary stream, newline included.

    The stream is read in chunks of buffer_size; data read past the end of
    one line is kept for the next. The last line may lack a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer_size must be an integer, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while self._pending is None or _newline(self._pending) not in self._pending:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        return self._take_line()

    def _take_line(self) -> AnyStr | None:
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = pending.find(_newline(pending))
        if index == -1:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream, newline included."""
    yield from LineReader(stream, buffer_size)