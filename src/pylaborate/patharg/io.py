'''Type definitions and stream utilities for I/O'''

import errno
import io
import os
import sys
from pathlib import Path
from typing import Annotated, BinaryIO, Iterator, Optional, Union
from typing_extensions import Self, TypeAlias

from .naming import export, export_annotated


PathArg: Annotated[
    TypeAlias, "Generalized command line argument or filesystem pathname type"
] = Union[str, bytes, Path, os.PathLike]

TEXT_ENCODING = "utf-8"


class StdStream(io.BufferedIOBase):
    """Non-owning binary view onto a process standard stream

    ## Usage

    Reads and writes are delegated to the wrapped binary stream, e.g
    `sys.stdin.buffer`. Closing the view will flush the wrapped stream
    if writable, and will mark only the view as closed. The process-wide
    stream remains open for later use.

    `StdStream` objects are usually created with `stdin_stream()` or
    `stdout_stream()`
    """

    def __init__(self, stream: BinaryIO, name: str, writable: bool = False):
        super().__init__()
        self._stream = stream
        self._name = name
        self._writable = writable

    @property
    def name(self) -> str:
        return self._name

    @property
    def stream(self) -> BinaryIO:
        """the wrapped stream"""
        return self._stream

    def __repr__(self):
        return "<%s %s>" % (self.__class__.__name__, self._name)

    def _check_open(self):
        if self.closed:
            raise ValueError("I/O operation on closed stream %s" % self._name)

    def readable(self) -> bool:
        return not self._writable

    def writable(self) -> bool:
        return self._writable

    def seekable(self) -> bool:
        return False

    def fileno(self) -> int:
        self._check_open()
        return self._stream.fileno()

    def isatty(self) -> bool:
        self._check_open()
        return self._stream.isatty()

    def read(self, size: Optional[int] = -1) -> bytes:
        self._check_open()
        return self._stream.read(size)

    def read1(self, size: int = -1) -> bytes:
        self._check_open()
        return self._stream.read1(size)

    def readinto(self, buffer) -> int:
        self._check_open()
        return self._stream.readinto(buffer)

    def readline(self, size: Optional[int] = -1) -> bytes:
        self._check_open()
        return self._stream.readline(size)

    def write(self, data) -> int:
        """write all of `data` to the wrapped stream, returning its length in bytes

        A raw stream, e.g `sys.stdout.buffer` under `python -u`, may accept
        only part of the data in each call. The remainder is written until
        none is left.

        ## Exceptions

        - raises `BlockingIOError` if the wrapped stream is non-blocking and
          would block. The exception's `characters_written` is the number
          of bytes written before that call
        """
        self._check_open()
        view = memoryview(data).cast("B")
        total = len(view)
        written = 0
        while written < total:
            count = self._stream.write(view[written:])
            if count is None:
                # fmt: off
                raise BlockingIOError(errno.EAGAIN, "Write to %s would block" % self._name,
                                      written)
                # fmt: on
            elif count <= 0:
                raise OSError(errno.EIO, "No bytes written to %s" % self._name)
            written += count
        return total

    def flush(self):
        ## a wrapped stream closed elsewhere has nothing to flush
        if self._writable and not self._stream.closed:
            self._stream.flush()


def binary_stream(stream) -> BinaryIO:
    """return the binary layer of a text stream, or `stream` if already binary"""
    return getattr(stream, "buffer", stream)


def _unavailable(name: str) -> OSError:
    return OSError(errno.EBADF, "No %s stream is available for this process" % name)


def stdin_stream() -> StdStream:
    """return a non-owning binary view onto the current `sys.stdin`

    ## Exceptions

    - raises `OSError` if `sys.stdin` is `None`, e.g under `pythonw`
    """
    stdin = sys.stdin
    if stdin is None:
        raise _unavailable("stdin")
    return StdStream(binary_stream(stdin), "<stdin>")


def stdout_stream() -> StdStream:
    """return a non-owning binary view onto the current `sys.stdout`

    Any text buffered under `sys.stdout` is flushed first, so that bytes
    written via the view will follow text already printed

    ## Exceptions

    - raises `OSError` if `sys.stdout` is `None`, e.g under `pythonw`
    """
    stdout = sys.stdout
    if stdout is None:
        raise _unavailable("stdout")
    stdout.flush()
    return StdStream(binary_stream(stdout), "<stdout>", writable=True)


def strip_terminator(raw: bytes) -> bytes:
    """remove one trailing `\\n` or `\\r\\n` from `raw`"""
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def line_text(raw: bytes) -> str:
    """decode a line read from a binary stream, without its line terminator

    ## Exceptions

    - raises `UnicodeDecodeError` if the line is not valid UTF-8
    """
    return strip_terminator(raw).decode(TEXT_ENCODING)


class Lines(Iterator[str]):
    """Single-pass iterator over the text lines of a binary stream

    ## Usage

    Each line is decoded as UTF-8, without its line terminator. A final
    line without a terminator is included.

    The stream is closed when the iterator is exhausted, on any error
    while reading or decoding, and on `close()` or exit from a `with`
    block. An error ends the iteration after propagating to the caller.
    """

    def __init__(self, handle: BinaryIO):
        self._handle: Optional[BinaryIO] = handle

    @property
    def closed(self) -> bool:
        return self._handle is None

    def close(self):
        handle = self._handle
        self._handle = None
        if handle is not None:
            handle.close()

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> str:
        handle = self._handle
        if handle is None:
            raise StopIteration
        try:
            raw = handle.readline()
            line = line_text(raw) if raw else None
        except Exception:
            self.close()
            raise
        if line is None:
            self.close()
            raise StopIteration
        return line

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()


# autopep8: off
# fmt: off
__all__ = []
export(__name__, "TEXT_ENCODING", StdStream, binary_stream, stdin_stream, stdout_stream,
       strip_terminator, line_text, Lines)
export_annotated(__name__)
