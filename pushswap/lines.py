"""Line-by-line reading from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional


class LineReader(Generic[AnyStr]):
    """Read lines from a binary or text stream, ``buffer_size`` items at a time.

    Each line keeps its trailing newline; the last line may lack one.
    Data read past a newline is held for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = 1) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    @staticmethod
    def _newline_index(data: AnyStr) -> int:
        """Return the index of the first newline in ``data``, or -1."""
        if isinstance(data, str):
            return data.find("\n")
        return data.find(b"\n")

    def _fill(self) -> Optional[AnyStr]:
        pending = self._pending
        while pending is None or self._newline_index(pending) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        return pending

    def readline(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._fill()
        if not pending:
            self._pending = None
            return None
        end = self._newline_index(pending)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1:]
        return pending[:end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line