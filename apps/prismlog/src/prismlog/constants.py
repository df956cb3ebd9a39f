"""
Prismlog constants.

Single source of truth for palette values and rendering thresholds used
across the color, level and formatter modules.
"""

from __future__ import annotations


# ================================
# Palette
# ================================

NAMED_COLORS: dict[str, str] = {
    # Reds
    "red_200": "#ffcdd2",
    "red_400": "#ef9a9a",
    "red_600": "#e57373",
    "red_800": "#d32f2f",
    # Oranges
    "orange_200": "#ffe0b2",
    "orange_400": "#ffb74d",
    "orange_600": "#fb8c00",
    "orange_800": "#ef6c00",
    # Yellows
    "yellow_200": "#fff9c4",
    "yellow_400": "#fff176",
    "yellow_600": "#fdd835",
    "yellow_800": "#f9a825",
    # Greens
    "green_200": "#c8e6c9",
    "green_400": "#81c784",
    "green_600": "#4caf50",
    "green_800": "#2e7d32",
    # Blues
    "blue_200": "#90caf9",
    "blue_400": "#64b5f6",
    "blue_600": "#1e88e5",
    "blue_800": "#1565c0",
    # Purples
    "purple_200": "#e1bee7",
    "purple_400": "#ba68c8",
    "purple_600": "#8e24aa",
    "purple_800": "#6a1b9a",
    # Pinks
    "pink_200": "#f8bbd0",
    "pink_400": "#f06292",
    "pink_600": "#e91e63",
    "pink_800": "#ad1457",
    # Teals
    "teal_200": "#80cbc4",
    "teal_400": "#26a69a",
    "teal_600": "#00897b",
    "teal_800": "#00695c",
    # Browns
    "brown_200": "#bcaaa4",
    "brown_400": "#8d6e63",
    "brown_600": "#6d4c41",
    "brown_800": "#4e342e",
    # Grays
    "gray_200": "#eeeeee",
    "gray_400": "#bdbdbd",
    "gray_600": "#757575",
    "gray_800": "#424242",
    # Indigos
    "indigo_200": "#9fa8da",
    "indigo_400": "#5c6bc0",
    "indigo_600": "#3949ab",
    "indigo_800": "#283593",
    # Cyans
    "cyan_200": "#80deea",
    "cyan_400": "#26c6da",
    "cyan_600": "#00acc1",
    "cyan_800": "#00838f",
}

# (main, light) pairs per severity family
SUCCESS_COLORS = (NAMED_COLORS["green_800"], NAMED_COLORS["green_400"])
INFO_COLORS = (NAMED_COLORS["blue_800"], NAMED_COLORS["blue_400"])
ERROR_COLORS = (NAMED_COLORS["red_800"], NAMED_COLORS["red_400"])
WARNING_COLORS = (NAMED_COLORS["yellow_800"], NAMED_COLORS["yellow_400"])
DEBUG_COLORS = (NAMED_COLORS["gray_800"], NAMED_COLORS["gray_400"])
TRACE_COLORS = (NAMED_COLORS["purple_800"], NAMED_COLORS["purple_400"])

# Accent for error stacks, independent of severity
STACK_COLOR = NAMED_COLORS["red_200"]

RAINBOW_NAME = "\U0001f308\U0001f984\U0001f389"


# ================================
# Console rendering
# ================================

# Compact context longer than this is re-rendered with indentation
CONTEXT_INLINE_LIMIT = 120

# Glyphs that mark a message as a pre-drawn box or table
BOX_DRAWING_CHARS: tuple[str, ...] = ("╔", "┌")

PLACEHOLDER_MESSAGE = "\n"


# ================================
# Cloud entries
# ================================

# Key levels walked when flattening context into labels
LABEL_FLATTEN_DEPTH = 2

CONTEXT_LABEL_PREFIX = "context"
