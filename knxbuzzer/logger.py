"""Levelled logging with a process-wide, swappable logger."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import IntEnum

MAX_MESSAGE_LENGTH = 255


class LogLevel(IntEnum):
    """Severity threshold; higher values let more messages through."""

    OFF = 0
    FATAL = 1
    ERROR = 2
    WARNING = 3
    INFO = 4
    TRACE = 5


class BaseLogger(ABC):
    """Interface of every logger backend."""

    @abstractmethod
    def init(self, level: LogLevel, block_till_connected: bool = False) -> None:
        """Start the logger with the given threshold."""

    @abstractmethod
    def set_loglevel(self, level: LogLevel) -> None:
        """Change the threshold."""

    @abstractmethod
    def fatal(self, msg: str, *args: object) -> None:
        """Log a fatal message, printf-style formatted with ``args``."""

    @abstractmethod
    def error(self, msg: str, *args: object) -> None:
        """Log an error message."""

    @abstractmethod
    def warning(self, msg: str, *args: object) -> None:
        """Log a warning message."""

    @abstractmethod
    def info(self, msg: str, *args: object) -> None:
        """Log an informational message."""

    @abstractmethod
    def trace(self, msg: str, *args: object) -> None:
        """Log a trace message."""


class DummyLogger(BaseLogger):
    """A logger that discards everything."""

    def init(self, level: LogLevel, block_till_connected: bool = False) -> None:
        pass

    def set_loglevel(self, level: LogLevel) -> None:
        pass

    def fatal(self, msg: str, *args: object) -> None:
        pass

    def error(self, msg: str, *args: object) -> None:
        pass

    def warning(self, msg: str, *args: object) -> None:
        pass

    def info(self, msg: str, *args: object) -> None:
        pass

    def trace(self, msg: str, *args: object) -> None:
        pass


_PY_LEVELS = {
    LogLevel.OFF: logging.CRITICAL + 10,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.WARNING: logging.WARNING,
    LogLevel.INFO: logging.INFO,
    LogLevel.TRACE: logging.DEBUG,
}


class StandardLogger(BaseLogger):
    """Logger writing through the :mod:`logging` module.

    Nothing is emitted until :meth:`init` has been called. Messages are
    formatted printf-style and cut to ``MAX_MESSAGE_LENGTH`` characters.
    """

    def __init__(self, name: str = "knxbuzzer") -> None:
        self._logger = logging.getLogger(name)
        self._level = LogLevel.OFF
        self._handler: logging.Handler | None = None

    def init(self, level: LogLevel, block_till_connected: bool = False) -> None:
        if self._handler is None:
            self._handler = logging.StreamHandler()
            self._logger.addHandler(self._handler)
        self.set_loglevel(level)

    def set_loglevel(self, level: LogLevel) -> None:
        self._level = LogLevel(level)
        self._logger.setLevel(_PY_LEVELS[self._level])

    def _emit(self, level: LogLevel, msg: str, args: tuple[object, ...]) -> None:
        if self._handler is None or self._level == LogLevel.OFF or level > self._level:
            return
        text = msg % args if args else msg
        self._logger.log(_PY_LEVELS[level], text[:MAX_MESSAGE_LENGTH])

    def fatal(self, msg: str, *args: object) -> None:
        self._emit(LogLevel.FATAL, msg, args)

    def error(self, msg: str, *args: object) -> None:
        self._emit(LogLevel.ERROR, msg, args)

    def warning(self, msg: str, *args: object) -> None:
        self._emit(LogLevel.WARNING, msg, args)

    def info(self, msg: str, *args: object) -> None:
        self._emit(LogLevel.INFO, msg, args)

    def trace(self, msg: str, *args: object) -> None:
        self._emit(LogLevel.TRACE, msg, args)


_active: BaseLogger | None = None
_fallback: DummyLogger | None = None


def set_logger(logger: BaseLogger | None) -> None:
    """Install ``logger`` as the process-wide logger; ``None`` removes it."""
    global _active
    _active = logger


def get_logger() -> BaseLogger:
    """Return the installed logger, or a shared discarding logger."""
    global _fallback
    if _active is not None:
        return _active
    if _fallback is None:
        _fallback = DummyLogger()
    return _fallback


def log_trace(msg: str, *args: object) -> None:
    get_logger().trace(msg, *args)


def log_info(msg: str, *args: object) -> None:
    get_logger().info(msg, *args)


def log_warning(msg: str, *args: object) -> None:
    get_logger().warning(msg, *args)


def log_error(msg: str, *args: object) -> None:
    get_logger().error(msg, *args)


def log_fatal(msg: str, *args: object) -> None:
    get_logger().fatal(msg, *args)