"""
Distributed trace context extraction.

Sources, highest precedence first: Cloud Trace variables (``TRACE_ID``,
``SPAN_ID``, ``TRACE_SAMPLED``), OpenTelemetry variables (``OTEL_TRACE_ID``,
``OTEL_SPAN_ID``), then a W3C ``TRACEPARENT`` header value.
"""

from __future__ import annotations

import os
import re
import secrets
from dataclasses import dataclass
from typing import Any, Mapping, Optional

_TRACE_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")
_SPAN_ID_PATTERN = re.compile(r"^[0-9a-f]{16}$")
_FLAGS_PATTERN = re.compile(r"^[0-9a-fA-F]{2}$")


@dataclass(frozen=True)
class TraceContext:
    trace_id: str
    span_id: Optional[str] = None
    trace_sampled: Optional[bool] = None


def parse_traceparent(value: str) -> Optional[TraceContext]:
    """Parse ``version-traceid-spanid-flags``. Malformed input yields None."""
    parts = value.strip().split("-")
    if len(parts) != 4:
        return None
    _, trace_id, span_id, flags = parts
    if not _TRACE_ID_PATTERN.match(trace_id) or not _SPAN_ID_PATTERN.match(span_id):
        return None
    if not _FLAGS_PATTERN.match(flags):
        return None
    return TraceContext(trace_id=trace_id, span_id=span_id, trace_sampled=bool(int(flags, 16) & 1))


def extract_trace_context(environ: Optional[Mapping[str, str]] = None) -> Optional[TraceContext]:
    env = os.environ if environ is None else environ

    trace_id = env.get("TRACE_ID") or env.get("OTEL_TRACE_ID")
    span_id = env.get("SPAN_ID") or env.get("OTEL_SPAN_ID")
    sampled_raw = env.get("TRACE_SAMPLED")
    sampled = sampled_raw == "true" if sampled_raw else None

    if trace_id:
        return TraceContext(trace_id=trace_id, span_id=span_id, trace_sampled=sampled)

    traceparent = env.get("TRACEPARENT")
    if traceparent:
        return parse_traceparent(traceparent)
    return None


def is_tracing_available(environ: Optional[Mapping[str, str]] = None) -> bool:
    env = os.environ if environ is None else environ
    return bool(env.get("TRACE_ID") or env.get("OTEL_TRACE_ID") or env.get("TRACEPARENT"))


def generate_test_trace_context() -> TraceContext:
    """Random sampled context, for tests and demos."""
    return TraceContext(trace_id=secrets.token_hex(16), span_id=secrets.token_hex(8), trace_sampled=True)


def get_gcp_trace_context(
    project_id: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> dict[str, Any]:
    """Trace fields in Cloud Logging form, or an empty dict without a trace."""
    env = os.environ if environ is None else environ
    context = extract_trace_context(env)
    if context is None:
        return {}
    project = project_id or env.get("GOOGLE_CLOUD_PROJECT") or "unknown"
    return {
        "trace": f"projects/{project}/traces/{context.trace_id}",
        "span_id": context.span_id,
        "trace_sampled": context.trace_sampled,
    }
