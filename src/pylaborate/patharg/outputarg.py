## outputarg.py

"""command line argument for a file to write, or `-` for stdout"""

from dataclasses import dataclass
from typing import Any, BinaryIO, ClassVar
from typing_extensions import Self

from .aio import AsyncWriter, run_sync_closing
from .base import ArgKind, StdPathArg
from .io import TEXT_ENCODING, stdout_stream
from .loglib import LogLevel, get_logger
from .naming import export

logger = get_logger(__name__)


def encode_text(text: str) -> bytes:
    if not isinstance(text, str):
        raise TypeError("Not a string: %s" % type(text).__name__, text)
    return text.encode(TEXT_ENCODING)


@dataclass(init=False, repr=False, eq=True, order=True, frozen=True)
class OutputArg(StdPathArg):
    """A command line argument for an output file, where `-` denotes stdout

    ## Usage

    ```python
    import argparse as ap
    from pylaborate.patharg import OutputArg

    parser = ap.ArgumentParser()
    parser.add_argument("-o", "--outfile", type=OutputArg, default="-")
    options = parser.parse_args()
    options.outfile.write_string("Hello\\n")
    ```

    For the path variant, `create()` and the write methods will create the
    file if it does not exist, else truncating the file. For the stdout
    variant, the stream is a non-owning view onto `sys.stdout`, such that
    closing the stream will flush but not close `sys.stdout`.

    ## Exceptions

    The write methods propagate any `OSError` from creating, writing, or
    flushing the output. A failed write is not retried.
    """

    STD_NAME: ClassVar[str] = "<stdout>"

    @classmethod
    def stdout(cls) -> Self:
        return cls.std()

    def is_stdout(self) -> bool:
        return self.is_std()

    def create(self) -> BinaryIO:
        """open the output for writing bytes

        Returns a binary stream, which may be used as a context manager.
        """
        logger.log(LogLevel.TRACE, "Creating %s for writing", format(self, "#"))
        if self.kind is ArgKind.STD:
            return stdout_stream()
        else:
            return open(self.path, "wb")

    def write_bytes(self, data: Any):
        """write a bytes-like object as the complete output"""
        ## ensure a bytes-like value before truncating the file
        data = memoryview(data)
        with self.create() as stream:
            stream.write(data)

    def write_string(self, text: str):
        """write `text`, encoded as UTF-8, as the complete output"""
        self.write_bytes(encode_text(text))

    async def create_async(self) -> AsyncWriter:
        return AsyncWriter(await run_sync_closing(self.create))

    async def write_bytes_async(self, data: Any):
        data = memoryview(data)
        async with await self.create_async() as writer:
            await writer.write(data)

    async def write_string_async(self, text: str):
        await self.write_bytes_async(encode_text(text))


# autopep8: off
# fmt: off
__all__ = []
export(__name__, OutputArg)
