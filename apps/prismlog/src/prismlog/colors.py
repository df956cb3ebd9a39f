"""
ANSI color utilities and the per-format color policy.

Colors are emitted as 24-bit SGR sequences. Text that reaches the logger may
carry color codes either as raw control characters or in their escaped
textual form (``\\u001b[...m``), so every primitive here understands both.
"""

from __future__ import annotations

import re
from typing import Callable

from .constants import NAMED_COLORS, STACK_COLOR

Style = Callable[[str], str]

ESC = "\x1b"
ESCAPED_ESC = "\\u001b"

FG_RESET = "\x1b[39m"

HEX_COLOR_PATTERN = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")

_RAW_SGR = re.compile(r"\x1b\[[0-9;]*m")
_ESCAPED_SGR = re.compile(r"\\u001b\[[0-9;]*m")

# Basic 16-color foregrounds
BASIC_COLORS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
}


# =============================================================================
# Style Builders
# =============================================================================


def is_hex_color(value: str) -> bool:
    return bool(HEX_COLOR_PATTERN.match(value))


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse ``#rgb`` or ``#rrggbb`` into an RGB triple."""
    if not is_hex_color(value):
        raise ValueError(f"Invalid hex color: {value!r}")
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def hex_style(value: str) -> Style:
    """Build a style function painting text with a truecolor foreground."""
    r, g, b = hex_to_rgb(value)
    opener = f"\x1b[38;2;{r};{g};{b}m"

    def style(text: str) -> str:
        return f"{opener}{text}{FG_RESET}"

    return style


def basic_style(name: str) -> Style:
    opener = BASIC_COLORS[name]

    def style(text: str) -> str:
        return f"{opener}{text}{FG_RESET}"

    return style


def add_color(content: str, color: str) -> str:
    """Apply a palette name (e.g. ``red_800``) or hex color to text.

    Unknown colors leave the text untouched.
    """
    hex_value = NAMED_COLORS.get(color, color)
    if not is_hex_color(hex_value):
        return content
    return hex_style(hex_value)(content)


color_stack: Style = hex_style(STACK_COLOR)


# =============================================================================
# Detection / Stripping
# =============================================================================


def strip_ansi_colors(text: str) -> str:
    """Remove raw and escaped color sequences.

    Runs to a fixed point so removing one sequence cannot expose another.
    """
    while True:
        stripped = _ESCAPED_SGR.sub("", _RAW_SGR.sub("", text))
        if stripped == text:
            return stripped
        text = stripped


def has_ansi_colors(text: str) -> bool:
    return bool(_RAW_SGR.search(text) or _ESCAPED_SGR.search(text))


def unescape_ansi_codes(text: str) -> str:
    """Turn ``\\u001b`` text into the raw escape character."""
    return text.replace(ESCAPED_ESC, ESC)


def escape_ansi_codes(text: str) -> str:
    """Turn raw escape characters into ``\\u001b`` text."""
    return text.replace(ESC, ESCAPED_ESC)


def apply_level_colors(text: str, style: Style) -> str:
    """Drop any existing coloring and paint the text with ``style``."""
    return style(strip_ansi_colors(text))


# =============================================================================
# Color Strategy
# =============================================================================


class ColorStrategy:
    """Per-format color handling.

    Machine-readable formats are always stripped. The console keeps colors a
    caller already applied (e.g. highlighted SQL) and only paints plain text.
    """

    @staticmethod
    def json(text: str) -> str:
        return strip_ansi_colors(text)

    @staticmethod
    def pretty_json(text: str) -> str:
        return strip_ansi_colors(text)

    @staticmethod
    def console(text: str, style: Style) -> str:
        if has_ansi_colors(text):
            return unescape_ansi_codes(text)
        return style(text)
