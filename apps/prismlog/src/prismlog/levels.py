"""
Severity level table.

Levels are created once at import time and never mutated. Lower ordinals are
more severe; a message is emitted when its ordinal is at or below the
configured floor.
"""

from __future__ import annotations

from dataclasses import dataclass

from .colors import Style, basic_style, hex_style
from .constants import (
    DEBUG_COLORS,
    ERROR_COLORS,
    INFO_COLORS,
    RAINBOW_NAME,
    SUCCESS_COLORS,
    TRACE_COLORS,
    WARNING_COLORS,
)


@dataclass(frozen=True)
class LoggerLevel:
    """A named severity with its display styling."""

    ordinal: int
    key: str
    name: str
    styled_name: str
    primary: Style
    secondary: Style


def _to_level(ordinal: int, name: str, colors: tuple[str, str], key: str | None = None) -> LoggerLevel:
    main, light = colors
    secondary = hex_style(light)
    return LoggerLevel(
        ordinal=ordinal,
        key=key or name.upper(),
        name=name,
        styled_name=secondary(name),
        primary=hex_style(main),
        secondary=secondary,
    )


_RAINBOW_STYLES: tuple[Style, ...] = (
    basic_style("red"),
    hex_style("#FFA500"),
    basic_style("yellow"),
    basic_style("green"),
    basic_style("blue"),
    hex_style("#4B0082"),
    hex_style("#8F00FF"),
)


def _rainbow(text: str) -> str:
    return "".join(_RAINBOW_STYLES[i % len(_RAINBOW_STYLES)](char) for i, char in enumerate(text))


def _plain(text: str) -> str:
    return text


LEVEL_SECURITY_ALERT_KEY = "SECURITY"
LEVEL_CRITICAL_KEY = "CRITICAL"
LEVEL_ERROR_KEY = "ERROR"
LEVEL_WARN_KEY = "WARN"
LEVEL_SUCCESS_KEY = "SUCCESS"
LEVEL_INFO_KEY = "INFO"
LEVEL_DEBUG_KEY = "DEBUG"
LEVEL_TRACE_KEY = "TRACE"
LEVEL_RAINBOW_KEY = "RAINBOW"
LEVEL_ANY_KEY = "ANY"
LEVEL_DEFAULT_KEY = LEVEL_ANY_KEY

LEVEL_SECURITY_ALERT = _to_level(0, LEVEL_SECURITY_ALERT_KEY, ERROR_COLORS)
LEVEL_CRITICAL = _to_level(1, LEVEL_CRITICAL_KEY, ERROR_COLORS)
LEVEL_ERROR = _to_level(2, LEVEL_ERROR_KEY, ERROR_COLORS)
LEVEL_WARN = _to_level(3, LEVEL_WARN_KEY, WARNING_COLORS)
LEVEL_SUCCESS = _to_level(4, LEVEL_SUCCESS_KEY, SUCCESS_COLORS)
LEVEL_INFO = _to_level(5, LEVEL_INFO_KEY, INFO_COLORS)
LEVEL_DEBUG = _to_level(6, LEVEL_DEBUG_KEY, DEBUG_COLORS)
LEVEL_TRACE = _to_level(7, LEVEL_TRACE_KEY, TRACE_COLORS)

# Decorative: outside the filtering order
LEVEL_RAINBOW = LoggerLevel(
    ordinal=8,
    key=LEVEL_RAINBOW_KEY,
    name=RAINBOW_NAME,
    styled_name=RAINBOW_NAME,
    primary=_rainbow,
    secondary=_plain,
)

LOGGER_LEVELS: dict[str, LoggerLevel] = {
    LEVEL_SECURITY_ALERT_KEY: LEVEL_SECURITY_ALERT,
    LEVEL_CRITICAL_KEY: LEVEL_CRITICAL,
    LEVEL_ERROR_KEY: LEVEL_ERROR,
    LEVEL_WARN_KEY: LEVEL_WARN,
    LEVEL_SUCCESS_KEY: LEVEL_SUCCESS,
    LEVEL_INFO_KEY: LEVEL_INFO,
    LEVEL_DEBUG_KEY: LEVEL_DEBUG,
    LEVEL_TRACE_KEY: LEVEL_TRACE,
    LEVEL_RAINBOW_KEY: LEVEL_RAINBOW,
    LEVEL_ANY_KEY: LEVEL_TRACE,
}


def get_level(key: str) -> LoggerLevel | None:
    """Look up a level by key. Returns None for unknown keys."""
    return LOGGER_LEVELS.get(key)


def is_level_enabled(level: LoggerLevel, floor_key: str | None) -> bool:
    """Decide whether ``level`` passes the ``floor_key`` filter.

    No floor (None or an empty key) lets everything through. An unknown floor
    mutes everything, since no ordering can be established against it.
    RAINBOW is decorative and passes any recognized floor.
    """
    if not floor_key:
        return True
    floor = get_level(floor_key)
    if floor is None:
        return False
    if level.key == LEVEL_RAINBOW_KEY:
        return True
    return level.ordinal <= floor.ordinal
