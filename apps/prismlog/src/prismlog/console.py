"""
Console facade.

Routes an application's default output surface through one Logger without
patching ``print`` or any other built-in. The host calls ``configure_console``
once and then logs through ``get_console()``.

Usage:
    from prismlog.console import configure_console, get_console

    configure_console({"format": "json"})
    get_console().info("ready", {"port": 8080})
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .config.logging import LoggingSettings
from .config.options import LoggerOptions
from .core import Logger


class ConsoleFacade:
    """Level methods bound to a single Logger."""

    def __init__(self, logger: Logger):
        self._logger = logger
        self.info = logger.info
        self.log = logger.info
        self.warn = logger.warn
        self.error = logger.error
        self.debug = logger.debug
        self.trace = logger.trace
        self.success = logger.success
        self.critical = logger.critical
        self.security_alert = logger.security_alert
        self.rainbow = logger.rainbow

    @property
    def logger(self) -> Logger:
        return self._logger

    def set_level(self, level: Optional[str]) -> "ConsoleFacade":
        self._logger.set_level(level)
        return self


ConsoleTarget = Union[Logger, LoggerOptions, Mapping[str, Any]]

_console: Optional[ConsoleFacade] = None


def configure_console(target: Optional[ConsoleTarget] = None, **logger_kwargs: Any) -> ConsoleFacade:
    """Install the process-wide console.

    Args:
        target: A Logger to reuse, or options to build one from. Without a
            target, options come from ``PRISMLOG_*`` environment settings.
        **logger_kwargs: Passed to the Logger constructor (e.g. ``sink``)
            when one is built here.
    """
    global _console

    if isinstance(target, Logger):
        logger = target
    elif target is not None:
        logger = Logger(target, **logger_kwargs)
    else:
        logger = Logger(LoggingSettings().to_options(), **logger_kwargs)

    _console = ConsoleFacade(logger)
    return _console


def get_console() -> ConsoleFacade:
    """Return the installed console, configuring a default one on first use."""
    if _console is None:
        return configure_console()
    return _console


def reset_console() -> None:
    global _console
    _console = None
