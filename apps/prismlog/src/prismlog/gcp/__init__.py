"""
Google Cloud Logging support.

- builder: LogEntry -> Cloud Logging LogEntry
- resources: monitored resource detection from the environment
- tracing: trace context extraction (Cloud Trace, OpenTelemetry, W3C)
"""

from .builder import GcpLogEntryBuilder, flatten_to_labels, map_severity
from .resources import GcpEnvironmentInfo, GcpResourceDetector
from .tracing import (
    TraceContext,
    extract_trace_context,
    generate_test_trace_context,
    get_gcp_trace_context,
    is_tracing_available,
    parse_traceparent,
)
from .types import GCP_RESOURCE_TYPES, LEVEL_TO_GCP_SEVERITY, GcpLogEntry, GcpResource, GcpSeverity

__all__ = [
    "GCP_RESOURCE_TYPES",
    "LEVEL_TO_GCP_SEVERITY",
    "GcpEnvironmentInfo",
    "GcpLogEntry",
    "GcpLogEntryBuilder",
    "GcpResource",
    "GcpResourceDetector",
    "GcpSeverity",
    "TraceContext",
    "extract_trace_context",
    "flatten_to_labels",
    "generate_test_trace_context",
    "get_gcp_trace_context",
    "is_tracing_available",
    "map_severity",
    "parse_traceparent",
]
