"""Bounded in-memory byte pipe connecting a writer thread to a reader thread."""

from __future__ import annotations

import threading
from collections import deque
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE: int = 4 * 1024 * 1024
READ_CHUNK_SIZE: int = 64 * 1024


class Pipe:
    """
    Byte pipe with a reader end and a writer end.

    Writes block while the buffer holds `buffer_size` bytes; reads block until
    bytes arrive or the writer closes. Closing either end wakes the other:
        - writer closed without error: the reader drains, then sees EOF.
        - writer closed with an error: the reader drains, then raises it.
        - reader closed: pending and future writes raise the reader's error
          (BrokenPipeError when none was given).
    """

    def __init__(self, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._cond = threading.Condition()
        # Written chunks in order; `_head` is the read offset into the first one.
        self._chunks: deque[bytes] = deque()
        self._head = 0
        self._buffered = 0
        self._buffer_size = buffer_size
        self._reader_closed = False
        self._reader_error: Optional[BaseException] = None
        self._writer_closed = False
        self._writer_error: Optional[BaseException] = None
        self.reader = PipeReader(self)
        self.writer = PipeWriter(self)

    def _read(self, size: int) -> bytes:
        with self._cond:
            while True:
                if self._reader_closed:
                    raise BrokenPipeError("read on closed pipe")
                if self._buffered:
                    data = self._take(size)
                    self._cond.notify_all()
                    return data
                if self._writer_closed:
                    if self._writer_error is not None:
                        raise self._writer_error
                    return b""
                self._cond.wait()

    def _write(self, data: bytes) -> int:
        with self._cond:
            if self._writer_closed:
                raise BrokenPipeError("write on closed pipe")
            written = 0
            while written < len(data):
                if self._reader_closed:
                    if self._reader_error is not None:
                        raise self._reader_error
                    raise BrokenPipeError("write on closed pipe")
                if self._writer_closed:
                    raise BrokenPipeError("write on closed pipe")
                space = self._buffer_size - self._buffered
                if space <= 0:
                    self._cond.wait()
                    continue
                chunk = data[written : written + space]
                self._chunks.append(chunk)
                self._buffered += len(chunk)
                written += len(chunk)
                self._cond.notify_all()
            return written

    def _take(self, size: int) -> bytes:
        parts = []
        wanted = min(size, self._buffered)
        while wanted:
            chunk = self._chunks[0]
            part = chunk[self._head : self._head + wanted]
            parts.append(part)
            wanted -= len(part)
            self._buffered -= len(part)
            self._head += len(part)
            if self._head == len(chunk):
                self._chunks.popleft()
                self._head = 0
        return b"".join(parts)

    def _close_reader(self, error: Optional[BaseException]) -> None:
        with self._cond:
            if self._reader_closed:
                return
            self._reader_closed = True
            self._reader_error = error
            self._chunks.clear()
            self._head = 0
            self._buffered = 0
            self._cond.notify_all()

    def _close_writer(self, error: Optional[BaseException]) -> None:
        with self._cond:
            if self._writer_closed:
                return
            self._writer_closed = True
            self._writer_error = error
            self._cond.notify_all()


class PipeReader:
    """
    Reader end of a Pipe.

    Iterating yields chunks until EOF, which lets HTTP clients stream it as a
    request body of unknown length.
    """

    def __init__(self, pipe: Pipe) -> None:
        self._pipe = pipe

    def read(self, size: Optional[int] = -1) -> bytes:
        if size is None or size < 0:
            chunks = []
            while True:
                chunk = self._pipe._read(READ_CHUNK_SIZE)
                if not chunk:
                    return b"".join(chunks)
                chunks.append(chunk)
        if size == 0:
            return b""
        return self._pipe._read(size)

    def __iter__(self) -> Iterator[bytes]:
        while True:
            chunk = self._pipe._read(READ_CHUNK_SIZE)
            if not chunk:
                return
            yield chunk

    def close(self, error: Optional[BaseException] = None) -> None:
        """Close the reader end; writers observe `error`."""
        self._pipe._close_reader(error)


class PipeWriter:
    """Writer end of a Pipe."""

    def __init__(self, pipe: Pipe) -> None:
        self._pipe = pipe

    def write(self, data: bytes | bytearray | memoryview) -> int:
        return self._pipe._write(bytes(data))

    def close(self, error: Optional[BaseException] = None) -> None:
        """Close the writer end; the reader sees EOF, or `error` once drained."""
        self._pipe._close_writer(error)
