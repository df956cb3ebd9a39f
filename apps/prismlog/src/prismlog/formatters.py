"""
Format rendering.

Given a canonical entry, its level and the logger options, produce the final
output string for the configured format:

- json: compact JSON, colors stripped from the message and string context
- prettyJson: indented JSON wrapped in the level's primary style
- gcp / cloud: a Cloud Logging LogEntry as compact JSON
- cli / browser / unset: one human-readable colored line
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Optional

from .colors import ColorStrategy, add_color, color_stack
from .config.options import LoggerOptions, PrefixOptions
from .constants import BOX_DRAWING_CHARS, CONTEXT_INLINE_LIMIT
from .encoding import encodable_error, orjson_dumps, orjson_pretty
from .gcp.builder import GcpLogEntryBuilder
from .levels import LoggerLevel
from .timestamp import rfc3339_timestamp
from .types import LogEntry


def colored_prefix(prefix: Optional[PrefixOptions]) -> str:
    if prefix is None:
        return ""
    if prefix.color:
        return add_color(prefix.value, prefix.color)
    return prefix.value


# =============================================================================
# Console Formatter
# =============================================================================


class ConsoleFormatter:
    """Renders ``prefix - [LEVEL][timestamp][filename] message context`` lines."""

    BOX_CHARS: tuple[str, ...] = BOX_DRAWING_CHARS
    CONTEXT_WIDTH = CONTEXT_INLINE_LIMIT
    PREFIX_SEPARATOR = " - "

    @classmethod
    def configure(
        cls,
        *,
        box_chars: tuple[str, ...] | None = None,
        context_width: int | None = None,
        prefix_separator: str | None = None,
    ) -> None:
        """Configure the box detection glyphs and layout parameters."""
        if box_chars is not None:
            cls.BOX_CHARS = tuple(box_chars)
        if context_width:
            cls.CONTEXT_WIDTH = context_width
        if prefix_separator is not None:
            cls.PREFIX_SEPARATOR = prefix_separator

    @classmethod
    def is_box(cls, message: str) -> bool:
        return any(char in message for char in cls.BOX_CHARS)

    @classmethod
    def format_context(cls, context: Any, level: LoggerLevel) -> str:
        if isinstance(context, str):
            return ColorStrategy.console(context, level.secondary)
        text = orjson_dumps(context)
        if len(text) > cls.CONTEXT_WIDTH:
            text = orjson_pretty(context)
        return ColorStrategy.console(text, level.secondary)

    @classmethod
    def format(cls, entry: LogEntry, level: LoggerLevel, prefix: str = "") -> str:
        metadata = entry.metadata

        message = entry.message
        if message:
            message = ColorStrategy.console(message, level.primary)
        if cls.is_box(message):
            message = "\n" + message

        context = cls.format_context(metadata.context, level) if metadata.has_context else ""
        filename = f"[{level.secondary(metadata.filename)}]" if metadata.filename else ""

        stack = ""
        if metadata.error and metadata.error.get("stack"):
            stack = "\n" + color_stack(metadata.error["stack"])

        head = f"{prefix}{cls.PREFIX_SEPARATOR}" if prefix else ""
        return "".join(
            [
                head,
                f"[{level.styled_name}][{level.secondary(entry.timestamp)}]",
                filename,
                f" {message} {context}",
                stack,
            ]
        )


# =============================================================================
# Structured Formats
# =============================================================================


def strip_entry_colors(entry: LogEntry) -> LogEntry:
    """Copy of the entry with colors removed from the message and string context.

    Error fields are made encodable; the context is left as the caller gave it.
    """
    metadata = entry.metadata
    if metadata.error is not None:
        metadata = replace(metadata, error=encodable_error(metadata.error))
    if isinstance(metadata.context, str):
        metadata = replace(metadata, context=ColorStrategy.json(metadata.context))
    return replace(entry, message=ColorStrategy.json(entry.message), metadata=metadata)


def render_json(entry: LogEntry) -> str:
    return orjson_dumps(strip_entry_colors(entry).to_dict())


def render_pretty_json(entry: LogEntry, level: LoggerLevel) -> str:
    return level.primary(orjson_pretty(strip_entry_colors(entry).to_dict()))


def render_gcp(entry: LogEntry, options: LoggerOptions, builder: GcpLogEntryBuilder) -> str:
    if options.timestamp != "RFC3339":
        entry = replace(entry, timestamp=rfc3339_timestamp())
    return orjson_dumps(builder.build(entry).to_dict())


def render(
    entry: LogEntry,
    level: LoggerLevel,
    options: LoggerOptions,
    *,
    prefix: str = "",
    gcp_builder: Optional[GcpLogEntryBuilder] = None,
) -> str:
    """Render an entry according to ``options.format``."""
    fmt = options.format
    if fmt == "json":
        return render_json(entry)
    if fmt == "prettyJson":
        return render_pretty_json(entry, level)
    if options.is_cloud_format:
        return render_gcp(entry, options, gcp_builder or GcpLogEntryBuilder(options.gcp))
    return ConsoleFormatter.format(entry, level, prefix)
