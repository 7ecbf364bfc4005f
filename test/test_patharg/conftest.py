## fixtures for pylaborate.patharg tests

import io
import sys
from pytest import fixture
from typing import Callable


@fixture
def feed_stdin(monkeypatch) -> Callable[[bytes], io.TextIOWrapper]:
    ## returns a function replacing sys.stdin with a stream for the provided
    ## bytes, for the duration of the test
    def feed(data: bytes) -> io.TextIOWrapper:
        stream = io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")
        monkeypatch.setattr(sys, "stdin", stream)
        return stream

    return feed


@fixture
def fake_stdout(monkeypatch) -> io.TextIOWrapper:
    ## replaces sys.stdout for the duration of the test. Written bytes are
    ## available from `fake_stdout.buffer.getvalue()`
    stream = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
    monkeypatch.setattr(sys, "stdout", stream)
    return stream


class ShortWriter(io.RawIOBase):
    ## raw binary stream accepting at most `limit` bytes per write
    def __init__(self, limit: int = 2):
        super().__init__()
        self.limit = limit
        self.data = bytearray()

    def writable(self) -> bool:
        return True

    def write(self, b) -> int:
        chunk = bytes(b[: self.limit])
        self.data.extend(chunk)
        return len(chunk)


class RawStdout:
    ## text stream stand-in whose binary layer is a raw stream, as for
    ## sys.stdout under `python -u`
    def __init__(self, raw: io.RawIOBase):
        self.buffer = raw
        self.closed = False

    def flush(self):
        pass


@fixture
def short_stdout(monkeypatch) -> ShortWriter:
    ## replaces sys.stdout with a stream writing at most two bytes per call.
    ## Written bytes are available from `short_stdout.data`
    raw = ShortWriter()
    monkeypatch.setattr(sys, "stdout", RawStdout(raw))
    return raw
