## aio.py

"""asynchronous stream adapters for asyncio applications

## Overview

The adapters in this module run each blocking call on a binary stream
under the default executor of the running event loop, for file and
standard stream I/O.

No executor, thread, or task is created here. The default executor is
managed by the event loop.
"""

import asyncio as aio
from functools import partial
from typing import Any, BinaryIO, Callable, Optional
from typing_extensions import Self, TypeVar

from .io import line_text
from .naming import export

T = TypeVar("T")


async def run_sync(callback: Callable[..., T], *args, **kwargs) -> T:
    """Call a synchronous function under the default executor of the running loop

    Returns the value returned by the function, or raises any exception
    raised by the function
    """
    loop = aio.get_running_loop()
    return await loop.run_in_executor(None, partial(callback, *args, **kwargs))


def _close_result(future: aio.Future):
    if not future.cancelled() and future.exception() is None:
        future.result().close()


async def run_sync_closing(callback: Callable[..., T], *args, **kwargs) -> T:
    """Call a synchronous function returning a closeable object, e.g a stream,
    under the default executor of the running loop

    If the awaiting task is cancelled before the call returns, the object
    is closed once the call has returned, and `asyncio.CancelledError` is
    raised to the task.
    """
    loop = aio.get_running_loop()
    future = loop.run_in_executor(None, partial(callback, *args, **kwargs))
    try:
        return await aio.shield(future)
    except aio.CancelledError:
        future.add_done_callback(_close_result)
        raise


class AsyncStream:
    """Base class for asynchronous adapters onto a binary stream

    An `AsyncStream` may be used as an asynchronous context manager,
    closing the stream on exit
    """

    def __init__(self, handle: BinaryIO):
        self._handle = handle

    @property
    def handle(self) -> BinaryIO:
        """the wrapped synchronous stream"""
        return self._handle

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __repr__(self):
        return "<%s %r>" % (self.__class__.__name__, self._handle)

    async def close(self):
        if not self._handle.closed:
            await run_sync(self._handle.close)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.close()


class AsyncReader(AsyncStream):
    """asynchronous adapter for a readable binary stream"""

    async def read(self, size: Optional[int] = -1) -> bytes:
        return await run_sync(self._handle.read, size)

    async def readline(self) -> bytes:
        return await run_sync(self._handle.readline)

    def lines(self) -> "AsyncLines":
        """return an `AsyncLines` iterator for the text lines of the stream"""
        return AsyncLines(self)


class AsyncWriter(AsyncStream):
    """asynchronous adapter for a writable binary stream"""

    async def write(self, data: Any) -> int:
        return await run_sync(self._handle.write, data)

    async def flush(self):
        await run_sync(self._handle.flush)


class AsyncLines:
    """Single-pass asynchronous iterator over the text lines of an `AsyncReader`

    ## Usage

    Lines are decoded as for `pylaborate.patharg.io.Lines`. The reader is
    closed when the iterator is exhausted, on any error while reading or
    decoding, and on `aclose()` or exit from an `async with` block.
    """

    def __init__(self, reader: AsyncReader):
        self._reader: Optional[AsyncReader] = reader

    @property
    def closed(self) -> bool:
        return self._reader is None

    async def aclose(self):
        reader = self._reader
        self._reader = None
        if reader is not None:
            await reader.close()

    def __aiter__(self) -> Self:
        return self

    async def __anext__(self) -> str:
        reader = self._reader
        if reader is None:
            raise StopAsyncIteration
        try:
            raw = await reader.readline()
            line = line_text(raw) if raw else None
        except Exception:
            await self.aclose()
            raise
        if line is None:
            await self.aclose()
            raise StopAsyncIteration
        return line

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_value, traceback):
        await self.aclose()


# autopep8: off
# fmt: off
__all__ = []
export(__name__, run_sync, run_sync_closing, AsyncStream, AsyncReader, AsyncWriter, AsyncLines)
