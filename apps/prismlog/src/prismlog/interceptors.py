"""
Interceptors routing standard library and structlog events through a Logger.

These are explicit seams: the host installs them; nothing is patched on import.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Optional

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from .core import Logger
from .levels import (
    LEVEL_CRITICAL,
    LEVEL_DEBUG,
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_TRACE,
    LEVEL_WARN,
    LoggerLevel,
    get_level,
)
from .sinks import BaseSink

# structlog method names that differ from level keys
_METHOD_LEVELS: dict[str, LoggerLevel] = {
    "critical": LEVEL_CRITICAL,
    "fatal": LEVEL_CRITICAL,
    "exception": LEVEL_ERROR,
    "error": LEVEL_ERROR,
    "err": LEVEL_ERROR,
    "warning": LEVEL_WARN,
    "warn": LEVEL_WARN,
    "info": LEVEL_INFO,
    "msg": LEVEL_INFO,
    "debug": LEVEL_DEBUG,
    "notset": LEVEL_TRACE,
}


def level_for_name(name: str) -> LoggerLevel:
    return _METHOD_LEVELS.get(name.lower()) or get_level(name.upper()) or LEVEL_INFO


def level_for_stdlib(levelno: int) -> LoggerLevel:
    if levelno >= logging.CRITICAL:
        return LEVEL_CRITICAL
    if levelno >= logging.ERROR:
        return LEVEL_ERROR
    if levelno >= logging.WARNING:
        return LEVEL_WARN
    if levelno >= logging.INFO:
        return LEVEL_INFO
    if levelno >= logging.DEBUG:
        return LEVEL_DEBUG
    return LEVEL_TRACE


def call_args(message: Optional[str], error: Optional[BaseException], context: Any) -> tuple[Any, ...]:
    """Positional arguments for a level method carrying all three parts."""
    if message is None:
        return (error, context) if error is not None else (context,)
    if error is not None:
        return (message, error, context)
    return (message, context)


# =============================================================================
# Standard Library
# =============================================================================


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging records to a Logger.

    The record's logger name travels as context; ``exc_info`` becomes the
    entry's error.
    """

    def __init__(self, logger: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.logger = logger

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = level_for_stdlib(record.levelno)
            if not self.logger.is_enabled(level):
                return
            error = record.exc_info[1] if record.exc_info else None
            args = call_args(record.getMessage(), error, {"logger": record.name})
            self.logger.sink.emit(self.logger.as_log(level, *args))
        except Exception:
            self.handleError(record)


def intercept_stdlib_logging(logger: Logger, level: str = "INFO") -> RedirectStdLibHandler:
    """Replace the root logger's handlers with one redirecting to ``logger``."""
    handler = RedirectStdLibHandler(logger)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler


# =============================================================================
# structlog
# =============================================================================


def _exception_from(exc_info: Any) -> Optional[BaseException]:
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple):
        return exc_info[1]
    if exc_info:
        return sys.exc_info()[1]
    return None


def structlog_renderer(logger: Logger) -> Processor:
    """Build a final structlog processor rendering events with ``logger``.

    ``event`` (or ``message``) becomes the message, ``exc_info`` the error and
    the remaining keys the context. Events below the logger's floor are dropped.
    """

    def render(wrapped: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        event = dict(event_dict)
        level = level_for_name(str(event.pop("level", method_name)))
        if not logger.is_enabled(level):
            raise structlog.DropEvent

        message = event.pop("event", None)
        if message is None:
            message = event.pop("message", None)
        error = _exception_from(event.pop("exc_info", None))
        event.pop("timestamp", None)

        args = call_args(None if message is None else str(message), error, event or None)
        return logger.as_log(level, *args)

    return render


class SinkLogger:
    """structlog wrapped logger writing rendered lines to a sink."""

    def __init__(self, sink: BaseSink):
        self._sink = sink

    def msg(self, message: str) -> None:
        self._sink.emit(message)

    log = debug = info = warn = warning = msg
    err = error = critical = fatal = exception = msg


class SinkLoggerFactory:
    def __init__(self, sink: BaseSink):
        self._sink = sink

    def __call__(self, *args: Any) -> SinkLogger:
        return SinkLogger(self._sink)


def configure_structlog(logger: Logger, level: str = "INFO") -> None:
    """Configure structlog so every event is rendered and emitted by ``logger``."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog_renderer(logger),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.INFO)),
        context_class=dict,
        logger_factory=SinkLoggerFactory(logger.sink),
        cache_logger_on_first_use=False,
    )
