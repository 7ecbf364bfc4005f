'''Treat `-` command line arguments as stdin or stdout

## Overview

Command line programs conventionally accept a path argument of `-` to
denote standard input, or standard output, depending on whether the
path is read from or written to. This package provides two value types
for that convention:

- `InputArg`: a file to read, or `-` for stdin
- `OutputArg`: a file to write, or `-` for stdout

Each type is constructed from the argument text, e.g as an argparse
`type`, and provides methods for opening, reading, or writing the file
or standard stream. Asynchronous methods are available for asyncio
applications. With pydantic installed, each type may be used as a model
field, serialized as the argument text.

No file is opened or checked when an argument is constructed.
'''

__all__ = []

from .naming import export, module_all  # NOQA E402

from .base import *  # NOQA E402
export(__name__, module_all(__name__ + ".base"))  # NOQA: F405

from .io import *  # NOQA E402
export(__name__, module_all(__name__ + ".io"))  # NOQA: F405

from .aio import *  # NOQA E402
export(__name__, module_all(__name__ + ".aio"))  # NOQA: F405

from .inputarg import *  # NOQA E402
export(__name__, module_all(__name__ + ".inputarg"))  # NOQA: F405

from .outputarg import *  # NOQA E402
export(__name__, module_all(__name__ + ".outputarg"))  # NOQA: F405
