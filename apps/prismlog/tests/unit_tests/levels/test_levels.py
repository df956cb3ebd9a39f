"""
Severity level table unit tests.
"""

from __future__ import annotations

import dataclasses

import pytest

from prismlog.colors import has_ansi_colors, strip_ansi_colors
from prismlog.levels import (
    LEVEL_CRITICAL,
    LEVEL_DEBUG,
    LEVEL_ERROR,
    LEVEL_INFO,
    LEVEL_RAINBOW,
    LEVEL_SECURITY_ALERT,
    LEVEL_SUCCESS,
    LEVEL_TRACE,
    LEVEL_WARN,
    LOGGER_LEVELS,
    get_level,
    is_level_enabled,
)

ORDERED = [
    LEVEL_SECURITY_ALERT,
    LEVEL_CRITICAL,
    LEVEL_ERROR,
    LEVEL_WARN,
    LEVEL_SUCCESS,
    LEVEL_INFO,
    LEVEL_DEBUG,
    LEVEL_TRACE,
]


class TestLevelTable:
    """Level catalog shape"""

    def test_ordinals_strictly_increase(self) -> None:
        """Severity ordinals run 0..7 in declaration order"""
        assert [level.ordinal for level in ORDERED] == list(range(8))

    def test_keys(self) -> None:
        """Keys are the uppercase level identifiers"""
        assert [level.key for level in ORDERED] == [
            "SECURITY",
            "CRITICAL",
            "ERROR",
            "WARN",
            "SUCCESS",
            "INFO",
            "DEBUG",
            "TRACE",
        ]

    def test_any_aliases_trace(self) -> None:
        """ANY resolves to the TRACE level"""
        assert LOGGER_LEVELS["ANY"] is LEVEL_TRACE

    def test_rainbow_is_decorative(self) -> None:
        """RAINBOW sits after TRACE with an unstyled secondary"""
        assert LEVEL_RAINBOW.ordinal == 8
        assert LEVEL_RAINBOW.styled_name == LEVEL_RAINBOW.name
        assert LEVEL_RAINBOW.secondary("plain") == "plain"

    def test_levels_are_immutable(self) -> None:
        """Levels cannot be reassigned"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            LEVEL_INFO.ordinal = 0  # type: ignore[misc]

    def test_unknown_key(self) -> None:
        """Unknown keys look up as None"""
        assert get_level("BOGUS") is None


class TestStyles:
    """Level style functions"""

    def test_styled_name_uses_secondary(self) -> None:
        """Styled name is the name in the secondary style"""
        assert LEVEL_ERROR.styled_name == LEVEL_ERROR.secondary("ERROR")
        assert strip_ansi_colors(LEVEL_ERROR.styled_name) == "ERROR"

    def test_primary_and_secondary_differ(self) -> None:
        """Primary and secondary styles are distinct colors"""
        assert LEVEL_INFO.primary("x") != LEVEL_INFO.secondary("x")
        assert has_ansi_colors(LEVEL_INFO.primary("x"))

    def test_rainbow_colors_each_character(self) -> None:
        """RAINBOW cycles seven colors per character"""
        result = LEVEL_RAINBOW.primary("abcdefgh")
        assert strip_ansi_colors(result) == "abcdefgh"
        # Seven colors cycle, so the eighth character reuses the first color
        assert result.startswith("\x1b[31ma")
        assert "\x1b[31mh" in result


class TestFiltering:
    """Floor filtering"""

    @pytest.mark.parametrize("level", [LEVEL_WARN, LEVEL_ERROR, LEVEL_CRITICAL, LEVEL_SECURITY_ALERT])
    def test_warn_floor_emits_severe(self, level) -> None:
        """WARN floor lets WARN and more severe levels through"""
        assert is_level_enabled(level, "WARN")

    @pytest.mark.parametrize("level", [LEVEL_INFO, LEVEL_DEBUG, LEVEL_TRACE, LEVEL_SUCCESS])
    def test_warn_floor_suppresses_verbose(self, level) -> None:
        """WARN floor drops less severe levels"""
        assert not is_level_enabled(level, "WARN")

    @pytest.mark.parametrize("level", ORDERED + [LEVEL_RAINBOW])
    def test_unknown_floor_mutes_everything(self, level) -> None:
        """An unknown floor suppresses every level"""
        assert not is_level_enabled(level, "BOGUS")

    @pytest.mark.parametrize("level", ORDERED + [LEVEL_RAINBOW])
    def test_no_floor_passes_everything(self, level) -> None:
        """Without a floor nothing is filtered"""
        assert is_level_enabled(level, None)

    @pytest.mark.parametrize("level", ORDERED + [LEVEL_RAINBOW])
    def test_empty_floor_passes_everything(self, level) -> None:
        """An empty floor key counts as no floor"""
        assert is_level_enabled(level, "")

    def test_any_floor_shows_everything(self) -> None:
        """ANY floor shows every level"""
        assert all(is_level_enabled(level, "ANY") for level in ORDERED + [LEVEL_RAINBOW])

    def test_rainbow_passes_recognized_floor(self) -> None:
        """RAINBOW is outside the ordering and passes any known floor"""
        assert is_level_enabled(LEVEL_RAINBOW, "SECURITY")
        assert is_level_enabled(LEVEL_RAINBOW, "WARN")
