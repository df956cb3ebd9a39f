"""
Prismlog Configuration Module.

- ``options``: per-Logger options (pydantic models)
- ``logging``: environment-driven defaults (``PRISMLOG_*``)

Usage:
    from prismlog.config import LoggerOptions, LoggingSettings

    options = LoggingSettings().to_options()
"""

from .logging import LoggingSettings
from .options import (
    CLOUD_FORMATS,
    GcpOptions,
    GcpResource,
    LogFormat,
    LoggerOptions,
    PrefixOptions,
)

__all__ = [
    "CLOUD_FORMATS",
    "GcpOptions",
    "GcpResource",
    "LogFormat",
    "LoggerOptions",
    "LoggingSettings",
    "PrefixOptions",
]
