## base.py

"""common definitions for hyphen-or-path command line arguments

## Overview

`StdPathArg` is the shared implementation for `InputArg` and `OutputArg`.
A value is either the standard stream variant, `ArgKind.STD`, or the
path variant, `ArgKind.PATH`, holding the argument text as provided.

A value never holds an open stream. Streams are acquired on each call
to an open or create method of the subclass.
"""

from dataclasses import dataclass
from enum import IntEnum
import os
from pathlib import Path
import re
from typing import Any, ClassVar, Optional, Tuple
from typing_extensions import Self

from .io import PathArg
from .naming import export

STD_ARG = "-"


class ArgKind(IntEnum):
    """variant tag for a `StdPathArg`

    The standard stream variant sorts before any path
    """
    STD = 0
    PATH = 1


class ArgumentTypeError(TypeError):
    """Exception raised when an argument is not a string, bytes, or path-like object"""

    pass


def coerce_arg(arg: PathArg) -> str:
    """return the text of a command line argument

    A `str` is returned as provided. `bytes`, as received for OS-native
    arguments, are decoded with `os.fsdecode()`, without loss. Path-like
    objects are reduced with `os.fspath()`

    ## Exceptions

    - raises `ArgumentTypeError` for any other type of `arg`
    """
    if isinstance(arg, str):
        return arg
    elif isinstance(arg, bytes):
        return os.fsdecode(arg)
    elif isinstance(arg, os.PathLike):
        return coerce_arg(os.fspath(arg))
    else:
        # fmt: off
        raise ArgumentTypeError("Unsupported argument type: %s" % type(arg).__name__,
                                arg)
        # fmt: on


## [[fill]align][sign][z][#][rest] per the format spec mini-language
_FORMAT_SPEC = re.compile(r"(?P<head>(?:.?[<>=^])?[-+ ]?z?)(?P<alternate>#?)(?P<tail>.*)", re.DOTALL)


def split_alternate(format_spec: str) -> Tuple[bool, str]:
    """return a flag for the alternate form `#` in `format_spec`, and the
    format spec without that flag"""
    m = _FORMAT_SPEC.fullmatch(format_spec)
    return bool(m["alternate"]), m["head"] + m["tail"]


@dataclass(init=False, repr=False, eq=True, order=True, frozen=True)
class StdPathArg:
    """A command line argument denoting either a standard stream or a path

    ## Usage

    `arg`
    : The argument, as a `str`, as OS-native `bytes`, or as a path-like
      object. Exactly `"-"` denotes the standard stream. Any other value,
      including an empty string, denotes a path. When not provided, the
      value denotes the standard stream.

    Values are immutable, hashable, and ordered. Two values are equal when
    both are of the same class and variant, with equal path text.

    `str()` returns the literal argument text, such that the class can
    parse that text back to an equal value. The alternate format `#`,
    e.g `f"{arg:#}"`, displays `STD_NAME` for the standard stream.

    ## Exceptions

    - raises `ArgumentTypeError` if `arg` is not a supported type
    """

    kind: ArgKind
    path: Optional[str]

    STD_NAME: ClassVar[str] = "<std>"

    def __init__(self, arg: PathArg = STD_ARG):
        text = coerce_arg(arg)
        if text == STD_ARG:
            self._bind(ArgKind.STD, None)
        else:
            self._bind(ArgKind.PATH, text)

    def _bind(self, kind: ArgKind, path: Optional[str]):
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "path", path)

    @classmethod
    def from_arg(cls, arg: PathArg) -> Self:
        """construct from a `str`, OS-native `bytes`, or path-like argument"""
        return cls(arg)

    @classmethod
    def from_os_string(cls, arg: bytes | str) -> Self:
        """construct from an OS-native argument, e.g an item of `os.environb`"""
        if not isinstance(arg, (bytes, str)):
            raise ArgumentTypeError("Not an OS string: %r" % (arg,), arg)
        return cls(arg)

    @classmethod
    def from_string(cls, arg: str) -> Self:
        """construct from a `str` argument"""
        if not isinstance(arg, str):
            raise ArgumentTypeError("Not a string: %r" % (arg,), arg)
        return cls(arg)

    @classmethod
    def parse(cls, text: str) -> Self:
        """parse argument text

        Every string is a valid argument. This method raises no exception
        for a `str` value
        """
        return cls.from_string(text)

    @classmethod
    def std(cls) -> Self:
        """return the standard stream variant"""
        return cls()

    @classmethod
    def default(cls) -> Self:
        """return the standard stream variant, as for an omitted argument"""
        return cls.std()

    @classmethod
    def from_path(cls, path: PathArg) -> Self:
        """return the path variant for `path`, without interpreting `"-"`

        This may be used to denote a file named `-` in the working directory
        """
        value = cls.__new__(cls)
        value._bind(ArgKind.PATH, coerce_arg(path))
        return value

    def is_std(self) -> bool:
        """return true for the standard stream variant"""
        return self.kind is ArgKind.STD

    def is_path(self) -> bool:
        """return true for the path variant"""
        return self.kind is ArgKind.PATH

    def as_path(self) -> Optional[Path]:
        """return a `Path` for the path variant, else `None`

        The `path` text remains the identity of the value. `Path` will
        normalize some pathnames, e.g `Path("")` denotes `"."`
        """
        if self.kind is ArgKind.PATH:
            return Path(self.path)
        return None

    def to_arg(self) -> str:
        """return the literal argument text"""
        if self.kind is ArgKind.STD:
            return STD_ARG
        return self.path

    def to_os_string(self) -> bytes:
        """return the literal argument text, encoded with `os.fsencode()`"""
        return os.fsencode(self.to_arg())

    def __str__(self) -> str:
        return self.to_arg()

    def __format__(self, format_spec: str) -> str:
        alternate, spec = split_alternate(format_spec)
        if alternate and self.kind is ArgKind.STD:
            return format(self.STD_NAME, spec)
        return format(self.to_arg(), spec)

    def __repr__(self) -> str:
        clsname = self.__class__.__name__
        if self.kind is ArgKind.PATH and self.path == STD_ARG:
            return "%s.from_path(%r)" % (clsname, self.path)
        return "%s(%r)" % (clsname, self.to_arg())

    @classmethod
    def validate(cls, value: Any) -> Self:
        """return `value` if an instance of this class, else construct from `value`

        ## Exceptions

        - raises `ValueError` for an unsupported type of `value`
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ArgumentTypeError as exc:
            raise ValueError(exc.args[0]) from exc

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> Any:
        ## pydantic is an optional dependency, used only when this class
        ## is applied as a field type within a pydantic model
        from pydantic_core import core_schema

        from_value = core_schema.no_info_plain_validator_function(cls.validate)
        # fmt: off
        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema([core_schema.str_schema(), from_value]),
            python_schema=from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_arg, info_arg=False, return_schema=core_schema.str_schema()),
        )
        # fmt: on


# autopep8: off
# fmt: off
__all__ = []
export(__name__, "STD_ARG", ArgKind, ArgumentTypeError, coerce_arg, split_alternate, StdPathArg)
