## loglib - pylaborate.patharg

from enum import IntEnum
import logging
from .naming import export
## type hints
from types import ModuleType
from typing import Any, Dict, Optional, Type, Union


class LogLevel(IntEnum):
    """log level enum, extended with the trace log level

    ## Usage

    The `LogLevel` enum provides constant values for the _level_ argument
    in calls to `logging.Logger.log()`

    This enum defines a non-normative `TRACE` log level, at one half of
    the priority of the `DEBUG` log level. patharg logs each stream
    open or create at `TRACE`.
    """
    CRITICAL = logging.CRITICAL
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG
    ## new: TRACE log level
    TRACE = int(logging.DEBUG / 2)
    NOTSET = logging.NOTSET


def ensure_log_levels(level_enum: Type[IntEnum] = LogLevel):
    """Ensure that each level defined in `level_enum` has a level name
    registered under the `logging` module"""
    for m in level_enum.__members__.values():
        if logging.getLevelName(m.value) != m.name:
            logging.addLevelName(m.value, m.name)


def logger_name(context: Union[str, Type, ModuleType, Any]) -> str:
    """return a logger name for a string, class, module, or other named object"""
    if isinstance(context, str):
        return context
    has_module = hasattr(context, "__module__")
    has_name = hasattr(context, "__name__")
    if has_module and has_name:
        return "%s.%s" % (context.__module__, context.__name__)
    elif has_name:
        return context.__name__
    elif has_module:
        return context.__module__
    else:
        return "log"


def get_logger(context: Union[str, Type, ModuleType, Any]) -> logging.Logger:
    """return the logger for a provided `context`

    ## Usage

    `context`
    : a string, or a class, module, or other named object. The logger name
      is determined by `logger_name()`

    The logger receives a `logging.NullHandler`, so that nothing is emitted
    unless the application has configured logging, e.g with a mapping from
    `create_logging_config()`
    """
    ensure_log_levels()
    logger = logging.getLogger(logger_name(context))
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger


def create_logging_config(
    # fmt: off
    name: str = "pylaborate.patharg",
    level: Union[LogLevel, int] = LogLevel.INFO,
    handler: Optional[str] = "consoleHandler",
    handler_class: Union[Type, str] = logging.StreamHandler,
    disable_existing_loggers: bool = False,
    # fmt: on
) -> Dict[str, Any]:
    """Return a mapping for `logging.config.dictConfig()`

    ## Usage

    `name`
    : the logger to configure. By default, the package logger for patharg

    `level`
    : the logging level for the logger and its handler

    `handler`
    : if not a _falsey_ value, the name of a handler to create for the
      logger, using `handler_class`. The handler class may be provided
      as a class or as a dotted class name
    """
    ensure_log_levels()
    config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": disable_existing_loggers,
        "loggers": {name: {"level": int(level)}},
    }
    if handler:
        if isinstance(handler_class, str):
            clsname = handler_class
        else:
            clsname = handler_class.__module__ + "." + handler_class.__name__
        config["loggers"][name]["handlers"] = [handler]
        config["handlers"] = {handler: {"class": clsname, "level": int(level)}}
    return config


# autopep8: off
# fmt: off
__all__ = []
export(__name__, LogLevel, ensure_log_levels, logger_name, get_logger, create_logging_config)
