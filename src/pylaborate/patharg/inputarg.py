## inputarg.py

"""command line argument for a file to read, or `-` for stdin"""

from dataclasses import dataclass
from typing import BinaryIO, ClassVar
from typing_extensions import Self

from .aio import AsyncLines, AsyncReader, run_sync_closing
from .base import ArgKind, StdPathArg
from .io import TEXT_ENCODING, Lines, stdin_stream
from .loglib import LogLevel, get_logger
from .naming import export

logger = get_logger(__name__)


@dataclass(init=False, repr=False, eq=True, order=True, frozen=True)
class InputArg(StdPathArg):
    """A command line argument for an input file, where `-` denotes stdin

    ## Usage

    ```python
    import argparse as ap
    from pylaborate.patharg import InputArg

    parser = ap.ArgumentParser()
    parser.add_argument("infile", type=InputArg, default="-", nargs="?")
    options = parser.parse_args()
    for line in options.infile.lines():
        print(len(line))
    ```

    Each call to `open()` or a read method acquires a new stream. For the
    stdin variant, the stream is a non-owning view onto `sys.stdin`, such
    that closing the stream will not close `sys.stdin`.

    ## Exceptions

    The read methods propagate any `OSError` from opening or reading the
    file. The text methods raise `UnicodeDecodeError` for input that is
    not valid UTF-8.
    """

    STD_NAME: ClassVar[str] = "<stdin>"

    @classmethod
    def stdin(cls) -> Self:
        return cls.std()

    def is_stdin(self) -> bool:
        return self.is_std()

    def open(self) -> BinaryIO:
        """open the input for reading bytes

        Returns a binary stream, which may be used as a context manager.
        """
        logger.log(LogLevel.TRACE, "Opening %s for reading", format(self, "#"))
        if self.kind is ArgKind.STD:
            return stdin_stream()
        else:
            return open(self.path, "rb")

    def read_bytes(self) -> bytes:
        """return the complete input as bytes"""
        with self.open() as stream:
            return stream.read()

    def read_string(self) -> str:
        """return the complete input, decoded as UTF-8"""
        return self.read_bytes().decode(TEXT_ENCODING)

    def lines(self) -> Lines:
        """open the input, returning an iterator over its text lines

        Errors from opening the input are raised on call. Errors from
        reading and decoding are raised during iteration
        """
        return Lines(self.open())

    async def open_async(self) -> AsyncReader:
        return AsyncReader(await run_sync_closing(self.open))

    async def read_bytes_async(self) -> bytes:
        async with await self.open_async() as reader:
            return await reader.read()

    async def read_string_async(self) -> str:
        return (await self.read_bytes_async()).decode(TEXT_ENCODING)

    async def lines_async(self) -> AsyncLines:
        return (await self.open_async()).lines()


# autopep8: off
# fmt: off
__all__ = []
export(__name__, InputArg)
