"""
Cloud Logging output through the Logger.
"""

from __future__ import annotations

import re
import subprocess
from dataclasses import replace

import orjson
import pytest

from prismlog import Logger, LoggerPlugin
from prismlog.config import GcpOptions, GcpResource

RFC3339 = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


class TestCloudLogging:
    """Logger output in the gcp and cloud formats"""

    @pytest.mark.parametrize("fmt", ["gcp", "cloud"])
    def test_cloud_formats_render_log_entries(self, lines, fmt: str) -> None:
        """Both cloud formats render a LogEntry with stripped text"""
        Logger(format=fmt, sink=lines.append).warn("\x1b[33mlow disk\x1b[0m")
        parsed = orjson.loads(lines[0])
        assert parsed["severity"] == "WARNING"
        assert parsed["textPayload"] == "low disk"
        assert RFC3339.match(parsed["timestamp"])

    def test_timestamp_is_rfc3339_whatever_the_option(self, lines) -> None:
        """Cloud entries always carry RFC3339 timestamps"""
        Logger(format="gcp", timestamp=False, sink=lines.append).info("m")
        Logger(format="gcp", timestamp="%H:%M", sink=lines.append).info("m")
        assert all(RFC3339.match(orjson.loads(line)["timestamp"]) for line in lines)

    def test_structured_context_and_labels(self, lines) -> None:
        """Structured context gives jsonPayload and derived labels"""
        options = {
            "format": "gcp",
            "prefix": {"value": "checkout"},
            "filename": "checkout.py",
            "gcp": GcpOptions(resource=GcpResource(type="global"), labels={"team": "payments"}),
        }
        Logger(options, sink=lines.append).error("charge failed", ValueError("declined"), {"order": {"id": 42}})

        parsed = orjson.loads(lines[0])
        assert parsed["severity"] == "ERROR"
        assert parsed["jsonPayload"]["message"] == "charge failed"
        assert parsed["jsonPayload"]["context"] == {"order": {"id": 42}}
        assert parsed["jsonPayload"]["error"]["name"] == "ValueError"
        assert parsed["labels"] == {
            "team": "payments",
            "scope": "checkout",
            "filename": "checkout.py",
            "error_type": "ValueError",
            "context_order_id": "42",
        }
        assert parsed["resource"]["type"] == "global"
        assert parsed["sourceLocation"] == {"file": "checkout.py"}

    def test_error_with_bytes_attributes(self, lines) -> None:
        """A subprocess failure renders with its output decoded"""
        error = subprocess.CalledProcessError(1, ["make"], output=b"build log")
        Logger(format="gcp", sink=lines.append).error("build failed", error, {"job": 1})

        payload = orjson.loads(lines[0])["jsonPayload"]
        assert payload["error"]["name"] == "CalledProcessError"
        assert payload["error"]["output"] == "build log"
        assert payload["context"] == {"job": 1}

    def test_plugins_run_before_cloud_rendering(self, lines) -> None:
        """Plugins transform the entry before the cloud record is built"""
        Logger.add_plugin(LoggerPlugin("redact", lambda entry: replace(entry, message="[redacted]")))
        Logger(format="gcp", sink=lines.append).info("secret")
        assert orjson.loads(lines[0])["textPayload"] == "[redacted]"
