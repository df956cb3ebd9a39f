"""
The Logger.

Every level method accepts up to three positional arguments in any of the
shapes understood by ``prismlog.normalizer``. A call builds a canonical
entry, runs it through the plugin pipeline, renders it for the configured
format and hands the resulting line to the sink.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from .config.options import LoggerOptions
from .formatters import colored_prefix, render
from .gcp.builder import GcpLogEntryBuilder
from .levels import (
    LEVEL_CRITICAL,
    LEVEL_DEBUG,
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_RAINBOW,
    LEVEL_SECURITY_ALERT,
    LEVEL_SUCCESS,
    LEVEL_TRACE,
    LEVEL_WARN,
    LoggerLevel,
    is_level_enabled,
)
from .normalizer import build_entry, resolve_arguments
from .plugins import PluginRegistry, get_plugin_registry
from .sinks import BaseSink, SinkLike, as_sink
from .timestamp import build_timestamp_generator
from .types import LogEntry, LoggerPlugin

OptionsLike = Union[LoggerOptions, Mapping[str, Any]]


def _coerce_options(options: Optional[OptionsLike], overrides: dict[str, Any]) -> LoggerOptions:
    if options is None:
        return LoggerOptions.model_validate(overrides)
    if isinstance(options, LoggerOptions):
        # Copied so set_level on this logger never leaks into another
        return LoggerOptions.model_validate({**options.model_dump(), **overrides})
    return LoggerOptions.model_validate({**options, **overrides})


class Logger:
    """Structured logger rendering to console, JSON, pretty JSON or Cloud Logging.

    Args:
        options: ``LoggerOptions`` or an equivalent mapping. Keyword arguments
            override individual fields.
        sink: Receives each rendered line; a ``BaseSink`` or any callable.
            Defaults to stdout.
        plugins: Plugin registry; defaults to the process-wide one.

    Instances are not synchronized: share one across threads only if the host
    serializes calls.
    """

    def __init__(
        self,
        options: Optional[OptionsLike] = None,
        *,
        sink: Optional[SinkLike] = None,
        plugins: Optional[PluginRegistry] = None,
        **overrides: Any,
    ):
        self.options = _coerce_options(options, overrides)
        self._sink = as_sink(sink)
        self._plugins = plugins if plugins is not None else get_plugin_registry()
        self._prefix = colored_prefix(self.options.prefix)
        self._get_timestamp = build_timestamp_generator(self.options.timestamp)
        self._gcp_builder = GcpLogEntryBuilder(self.options.gcp) if self.options.is_cloud_format else None

    @property
    def sink(self) -> BaseSink:
        return self._sink

    @property
    def plugins(self) -> PluginRegistry:
        return self._plugins

    @property
    def gcp_builder(self) -> Optional[GcpLogEntryBuilder]:
        return self._gcp_builder

    # =========================================================================
    # Entry Construction / Rendering
    # =========================================================================

    def as_entry(self, level: str, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> LogEntry:
        """Build the canonical entry for a call, after plugins have run."""
        entry = build_entry(
            level,
            self._get_timestamp(),
            resolve_arguments(arg1, arg2, arg3),
            scope=self.options.prefix,
            filename=self.options.filename,
        )
        return self._plugins.apply(entry)

    def as_log(self, level: LoggerLevel, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> str:
        """Render a call to its final output string without emitting it."""
        entry = self.as_entry(level.key, arg1, arg2, arg3)
        return render(entry, level, self.options, prefix=self._prefix, gcp_builder=self._gcp_builder)

    def is_enabled(self, level: LoggerLevel) -> bool:
        return is_level_enabled(level, self.options.level)

    def _print_log(self, level: LoggerLevel, arg1: Any, arg2: Any, arg3: Any) -> None:
        if not self.is_enabled(level):
            return
        self._sink.emit(self.as_log(level, arg1, arg2, arg3))

    # =========================================================================
    # Level Methods
    # =========================================================================

    def log(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_INFO, arg1, arg2, arg3)

    def info(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_INFO, arg1, arg2, arg3)

    def trace(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_TRACE, arg1, arg2, arg3)

    def debug(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_DEBUG, arg1, arg2, arg3)

    def warn(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_WARN, arg1, arg2, arg3)

    def error(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_ERROR, arg1, arg2, arg3)

    def success(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_SUCCESS, arg1, arg2, arg3)

    def critical(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_CRITICAL, arg1, arg2, arg3)

    def security_alert(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_SECURITY_ALERT, arg1, arg2, arg3)

    def rainbow(self, arg1: Any = None, arg2: Any = None, arg3: Any = None) -> None:
        self._print_log(LEVEL_RAINBOW, arg1, arg2, arg3)

    def set_level(self, level: Optional[str]) -> "Logger":
        """Change the filter floor. Returns the logger for chaining."""
        self.options.level = level
        return self

    @staticmethod
    def add_plugin(plugin: LoggerPlugin) -> None:
        """Register a plugin on the process-wide registry. Order matters."""
        get_plugin_registry().add(plugin)
