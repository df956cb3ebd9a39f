"""
Format renderer unit tests.
"""

from __future__ import annotations

import orjson

from prismlog.colors import color_stack, has_ansi_colors, strip_ansi_colors
from prismlog.config.options import LoggerOptions, PrefixOptions
from prismlog.formatters import ConsoleFormatter, colored_prefix, render, strip_entry_colors
from prismlog.levels import LEVEL_ERROR, LEVEL_INFO, LEVEL_WARN
from prismlog.types import EntryMetadata, LogEntry

SQL = "\x1b[94mSELECT\x1b[0m * FROM users"


def make_entry(message: str = "hello", **metadata) -> LogEntry:
    return LogEntry(level="INFO", timestamp="12:00:00", message=message, metadata=EntryMetadata(**metadata))


class TestConsoleFormatter:
    """Console line rendering"""

    def test_basic_layout(self) -> None:
        """Level, timestamp and message layout"""
        line = ConsoleFormatter.format(make_entry(), LEVEL_INFO)
        assert strip_ansi_colors(line) == "[INFO][12:00:00] hello "

    def test_level_and_timestamp_styling(self) -> None:
        """Level name and timestamp use the secondary style"""
        line = ConsoleFormatter.format(make_entry(), LEVEL_INFO)
        assert line.startswith(f"[{LEVEL_INFO.styled_name}][{LEVEL_INFO.secondary('12:00:00')}]")
        assert LEVEL_INFO.primary("hello") in line

    def test_prefix_and_filename(self) -> None:
        """Prefix and filename columns"""
        entry = make_entry(filename="app.py")
        line = ConsoleFormatter.format(entry, LEVEL_INFO, prefix="api")
        assert strip_ansi_colors(line) == "api - [INFO][12:00:00][app.py] hello "
        assert f"[{LEVEL_INFO.secondary('app.py')}]" in line

    def test_compact_context(self) -> None:
        """Short context is inline compact JSON"""
        line = ConsoleFormatter.format(make_entry(context={"a": 1}), LEVEL_INFO)
        assert strip_ansi_colors(line) == '[INFO][12:00:00] hello {"a":1}'
        assert LEVEL_INFO.secondary('{"a":1}') in line

    def test_long_context_is_indented(self) -> None:
        """Context over the width limit is indented JSON"""
        context = {f"key_{i}": "x" * 10 for i in range(10)}
        line = strip_ansi_colors(ConsoleFormatter.format(make_entry(context=context), LEVEL_INFO))
        assert '{\n  "key_0": "xxxxxxxxxx"' in line

    def test_string_context(self) -> None:
        """String context is appended as is"""
        line = ConsoleFormatter.format(make_entry(context="extra"), LEVEL_INFO)
        assert strip_ansi_colors(line) == "[INFO][12:00:00] hello extra"

    def test_empty_message_not_styled(self) -> None:
        """An empty message stays empty"""
        line = ConsoleFormatter.format(make_entry("", context={"a": 1}), LEVEL_INFO)
        assert strip_ansi_colors(line) == '[INFO][12:00:00]  {"a":1}'

    def test_precolored_message_preserved(self) -> None:
        """Caller colors are kept on the console"""
        line = ConsoleFormatter.format(make_entry(SQL), LEVEL_INFO)
        assert SQL in line
        assert LEVEL_INFO.primary(SQL) not in line

    def test_escaped_colors_are_unescaped(self) -> None:
        """Escaped color codes become real escapes"""
        line = ConsoleFormatter.format(make_entry("\\u001b[32mok\\u001b[0m"), LEVEL_INFO)
        assert "\x1b[32mok\x1b[0m" in line

    def test_error_stack_uses_accent(self) -> None:
        """Stacks render in the accent color"""
        entry = make_entry(error={"name": "ValueError", "stack": "ValueError: boom"})
        line = ConsoleFormatter.format(entry, LEVEL_ERROR)
        assert line.endswith("\n" + color_stack("ValueError: boom"))

    def test_box_message_starts_on_new_line(self) -> None:
        """Box-drawn messages start on a new line"""
        box = "╔══╗\n║ok║\n╚══╝"
        line = strip_ansi_colors(ConsoleFormatter.format(make_entry(box), LEVEL_INFO))
        assert line == f"[INFO][12:00:00] \n{box} "

    def test_box_chars_configurable(self) -> None:
        """Box glyphs can be configured"""
        ConsoleFormatter.configure(box_chars=("+",))
        line = strip_ansi_colors(ConsoleFormatter.format(make_entry("+--+"), LEVEL_INFO))
        assert line == "[INFO][12:00:00] \n+--+ "

    def test_colored_prefix(self) -> None:
        """Prefix is colored only when a color is set"""
        assert colored_prefix(None) == ""
        assert colored_prefix(PrefixOptions(value="api")) == "api"
        assert has_ansi_colors(colored_prefix(PrefixOptions(value="api", color="blue_400")))


class TestJsonFormats:
    """JSON and pretty JSON rendering"""

    def test_json_strips_message_and_string_context(self) -> None:
        """JSON strips colors from message and string context"""
        entry = make_entry("\x1b[31mred\x1b[0m", context="\\u001b[32mgreen\\u001b[0m")
        data = orjson.loads(render(entry, LEVEL_INFO, LoggerOptions(format="json")))
        assert data["message"] == "red"
        assert data["metadata"]["context"] == "green"

    def test_json_is_compact(self) -> None:
        """JSON output is a single compact line"""
        text = render(make_entry(context={"a": 1}), LEVEL_INFO, LoggerOptions(format="json"))
        assert text == '{"level":"INFO","timestamp":"12:00:00","message":"hello","metadata":{"context":{"a":1}}}'

    def test_json_leaves_structured_context(self) -> None:
        """Structured context is serialized untouched"""
        entry = make_entry(context={"sql": SQL})
        data = orjson.loads(render(entry, LEVEL_INFO, LoggerOptions(format="json")))
        assert data["metadata"]["context"] == {"sql": SQL}

    def test_pretty_json_wrapped_in_primary_style(self) -> None:
        """Pretty JSON is indented and wrapped in the level color"""
        text = render(make_entry("\x1b[31mred\x1b[0m"), LEVEL_WARN, LoggerOptions(format="prettyJson"))
        inner = orjson.dumps(
            {"level": "INFO", "timestamp": "12:00:00", "message": "red", "metadata": {}},
            option=orjson.OPT_INDENT_2,
        ).decode()
        assert text == LEVEL_WARN.primary(inner)

    def test_strip_entry_colors_keeps_original(self) -> None:
        """Stripping returns a copy"""
        entry = make_entry("\x1b[31mred\x1b[0m")
        assert strip_entry_colors(entry).message == "red"
        assert entry.message == "\x1b[31mred\x1b[0m"

    def test_default_format_is_console(self) -> None:
        """Unset, cli and browser formats render console lines"""
        for fmt in (None, "cli", "browser"):
            text = render(make_entry(), LEVEL_INFO, LoggerOptions(format=fmt))
            assert strip_ansi_colors(text) == "[INFO][12:00:00] hello "

    def test_error_fields_made_encodable(self) -> None:
        """Error fields are made encodable on a copy of the entry"""
        entry = make_entry(error={"name": "CalledProcessError", "output": b"log", "stderr": None})
        data = orjson.loads(render(entry, LEVEL_ERROR, LoggerOptions(format="json")))
        assert data["metadata"]["error"] == {"name": "CalledProcessError", "output": "log", "stderr": None}
        assert entry.metadata.error["output"] == b"log"
