## naming.py

"""`__all__` management for the patharg modules"""

import sys
from types import ModuleType
from typing import Generator, List, Optional, Sequence, Union
from typing_extensions import Annotated, TypeAlias, TypeVar


class ModuleLookupError(LookupError):
    """Exception raised when a module name is not found in `sys.modules`"""

    pass


ModuleArg: Annotated[TypeAlias, "Module or module name"] = Union[str, ModuleType]


def get_module(ident: ModuleArg) -> ModuleType:
    """return the module denoted by `ident`

    `ident` may be a module object, or the name of a module already
    present in `sys.modules`

    ## Exceptions

    - Raises `ModuleLookupError` if `ident` is a string that does not
      name a loaded module
    """
    if isinstance(ident, str):
        m = sys.modules.get(ident, None)
        if m is None:
            raise ModuleLookupError(f"Module not found for name: {ident!r}", ident)
        return m
    return ident


def _names(present: Optional[Sequence[str]], *objects) -> Generator[str, None, None]:
    ## yield the export name for each of `objects`, flattening nested
    ## sequences and skipping any name already in `present`
    for o in objects:
        if isinstance(o, str):
            name = o
        elif isinstance(o, Sequence):
            yield from _names(present, *o)
            continue
        elif hasattr(o, "__name__"):
            name = o.__name__
        else:
            raise ValueError(f"Unable to determine name for {o!r}", o)
        if present is None or name not in present:
            yield name


def export(module: ModuleArg, *objects) -> Sequence[str]:
    """extend the `__all__` attribute of `module` with the names of `objects`

    Each of `objects` may be a string name, a sequence (processed
    recursively), or an object providing `__name__`. Names already
    listed are not repeated.

    If `module` has no `__all__` a new list is bound. A non-list
    `__all__` keeps its type.

    Returns the updated `__all__` value.

    **Example:** re-exporting a submodule from a package `__init__.py`
    ```python
    from .naming import export, module_all
    from .inputarg import *

    export(__name__, module_all(__name__ + ".inputarg"))
    ```
    """
    m = get_module(module)
    current = getattr(m, "__all__", None)
    if current is None:
        updated = list(_names(None, *objects))
    elif isinstance(current, List):
        current.extend(list(_names(current, *objects)))
        updated = current
    else:
        items = list(current)
        items.extend(_names(current, *objects))
        updated = current.__class__(items)
    m.__all__ = updated
    return updated


T = TypeVar("T")


def module_all(module: ModuleArg, default: Optional[T] = None) -> Optional[Union[List[str], T]]:
    """return the `__all__` value of a module, or `default` if not defined"""
    return getattr(get_module(module), "__all__", default)


def export_annotated(module: ModuleArg) -> Optional[Sequence[str]]:
    '''export each module-level annotated name, e.g a `TypeAlias`, from `module`'''
    m = get_module(module)
    annotations = getattr(m, "__annotations__", None)
    if annotations:
        return export(m, tuple(annotations.keys()))
    return None


# autopep8: off
# fmt: off
__all__ = []
export(__name__, ModuleLookupError, "ModuleArg", get_module, export, module_all, export_annotated)
