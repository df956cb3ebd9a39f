"""
Prismlog: a structured logging front-end.

Accepts a level, a message, an optional error and optional context, and
renders them as colored console lines, JSON, pretty JSON, or Google Cloud
Logging entries.

Design Pattern: Strategy Pattern for format and color handling.
Library: orjson for serialization, pydantic for configuration, structlog
and stdlib logging integration through explicit interceptors.
"""

from .colors import ColorStrategy, add_color, escape_ansi_codes, has_ansi_colors, strip_ansi_colors, unescape_ansi_codes
from .config import GcpOptions, GcpResource, LoggerOptions, LoggingSettings, PrefixOptions
from .console import ConsoleFacade, configure_console, get_console, reset_console
from .core import Logger
from .levels import LOGGER_LEVELS, LoggerLevel, get_level
from .plugins import PluginRegistry, get_plugin_registry, reset_plugin_registry
from .types import EntryMetadata, LogEntry, LoggerPlugin

__all__ = [
    "ColorStrategy",
    "ConsoleFacade",
    "EntryMetadata",
    "GcpOptions",
    "GcpResource",
    "LOGGER_LEVELS",
    "LogEntry",
    "Logger",
    "LoggerLevel",
    "LoggerOptions",
    "LoggerPlugin",
    "LoggingSettings",
    "PluginRegistry",
    "PrefixOptions",
    "add_color",
    "configure_console",
    "escape_ansi_codes",
    "get_console",
    "get_level",
    "get_plugin_registry",
    "has_ansi_colors",
    "reset_console",
    "reset_plugin_registry",
    "strip_ansi_colors",
    "unescape_ansi_codes",
]
