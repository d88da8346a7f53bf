"""
geombuild.log - warnings and errors raised while building geometry.

Usage:
    from geombuild import log

    log.warn("negative xSize not allowed - will invert")

    try:
        build()
    except Exception as e:
        log.error(e, "Plane build failed")  # includes traceback

Messages go to the standard "geombuild" logger. set_callback() additionally
hands them to a host application as callback(level, message).
"""

import logging
import traceback
from enum import IntEnum

_logger = logging.getLogger("geombuild")
_callback_handler = None


class Level(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def _emit(level: Level, msg_or_exc, context: str):
    if isinstance(msg_or_exc, BaseException):
        tb = "".join(traceback.format_exception(type(msg_or_exc), msg_or_exc, msg_or_exc.__traceback__))
        msg = f"{type(msg_or_exc).__name__}: {msg_or_exc}\n{tb}"
        if context:
            msg = f"{context}: {msg}"
    else:
        msg = str(msg_or_exc)
    _logger.log(level, msg)


def warn(msg_or_exc, context: str = ""):
    _emit(Level.WARN, msg_or_exc, context)


warning = warn


def error(msg_or_exc, context: str = ""):
    """Log error message, or exception with its traceback."""
    _emit(Level.ERROR, msg_or_exc, context)


def set_level(level):
    _logger.setLevel(int(level))


class _CallbackHandler(logging.Handler):
    def __init__(self, callback):
        super().__init__()
        self.callback = callback

    def emit(self, record):
        level = max((lv for lv in Level if lv <= record.levelno), default=Level.DEBUG)
        self.callback(level, record.getMessage())


def set_callback(callback):
    """Route messages to callback(level, message). None removes the callback."""
    global _callback_handler
    if _callback_handler is not None:
        _logger.removeHandler(_callback_handler)
        _callback_handler = None
    if callback is not None:
        _callback_handler = _CallbackHandler(callback)
        _logger.addHandler(_callback_handler)
