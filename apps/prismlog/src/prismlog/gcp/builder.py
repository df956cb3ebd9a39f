"""
Cloud Logging entry builder.

Turns a canonical LogEntry into a GcpLogEntry: severity mapping, payload
shaping, label flattening and source location.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Optional

from ..colors import ColorStrategy
from ..config.options import GcpOptions, GcpResource
from ..constants import CONTEXT_LABEL_PREFIX, LABEL_FLATTEN_DEPTH
from ..encoding import encodable_error, orjson_dumps
from .resources import GcpResourceDetector
from .tracing import get_gcp_trace_context
from .types import LEVEL_TO_GCP_SEVERITY, GcpLogEntry, GcpSeverity

if TYPE_CHECKING:
    from ..types import LogEntry

_ERROR_CORE_FIELDS = ("name", "message", "stack")


def is_structured(value: Any) -> bool:
    """Whether a context value is an object (mapping or sequence) rather than a scalar."""
    return isinstance(value, (Mapping, list, tuple))


def label_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_structured(value):
        return orjson_dumps(value)
    return str(value)


def _items(obj: Any):
    if isinstance(obj, Mapping):
        return obj.items()
    return enumerate(obj)


def flatten_to_labels(
    labels: Dict[str, str],
    obj: Any,
    prefix: str,
    max_depth: int = LABEL_FLATTEN_DEPTH,
    current_depth: int = 0,
) -> None:
    """Write ``obj`` into ``labels`` as lowercased ``prefix_key`` entries.

    Nested objects are walked until ``max_depth`` key levels; anything deeper
    is stored as its JSON text.
    """
    if current_depth >= max_depth or not is_structured(obj):
        return
    for key, value in _items(obj):
        label_key = f"{prefix}_{key}".lower()
        if is_structured(value) and current_depth < max_depth - 1:
            flatten_to_labels(labels, value, label_key, max_depth, current_depth + 1)
        else:
            labels[label_key] = label_value(value)


class GcpLogEntryBuilder:
    """Builds Cloud Logging entries for one logger's options."""

    def __init__(self, options: Optional[GcpOptions] = None, detector: Optional[GcpResourceDetector] = None):
        self._options = options or GcpOptions()
        self._resource = self._options.resource
        self._labels: Dict[str, str] = dict(self._options.labels or {})
        if self._resource is None and self._options.detect_resource:
            self._resource = (detector or GcpResourceDetector()).detect_resource()

    @property
    def resource(self) -> Optional[GcpResource]:
        return self._resource

    @property
    def labels(self) -> Dict[str, str]:
        return dict(self._labels)

    def set_resource(self, resource: GcpResource) -> None:
        self._resource = resource

    def add_labels(self, labels: Mapping[str, str]) -> None:
        self._labels.update(labels)

    def build(self, entry: LogEntry) -> GcpLogEntry:
        text_payload, json_payload = self._payload(entry)
        trace: Dict[str, Any] = {}
        if self._options.enable_tracing:
            trace = get_gcp_trace_context(self._options.project_id)

        source_location = None
        if self._options.enable_source_location and entry.metadata.filename:
            source_location = {"file": entry.metadata.filename}

        return GcpLogEntry(
            severity=map_severity(entry.level),
            timestamp=entry.timestamp,
            text_payload=text_payload,
            json_payload=json_payload,
            resource=self._resource,
            labels=self._build_labels(entry) or None,
            trace=trace.get("trace"),
            span_id=trace.get("span_id"),
            trace_sampled=trace.get("trace_sampled"),
            source_location=source_location,
        )

    def _payload(self, entry: LogEntry) -> tuple[Optional[str], Optional[Dict[str, Any]]]:
        message = ColorStrategy.json(entry.message)
        context = entry.metadata.context
        error = entry.metadata.error

        if is_structured(context):
            payload: Dict[str, Any] = {"message": message, "context": context}
            if error is not None:
                payload["error"] = _error_info(error)
            return None, payload

        text = message
        if entry.metadata.has_context:
            text += " " + (ColorStrategy.json(context) if isinstance(context, str) else orjson_dumps(context))
        if error is not None:
            text += f"\nError: {error.get('name') or 'Unknown Error'}"
            if error.get("stack"):
                text += "\n" + ColorStrategy.json(error["stack"])
        return text, None

    def _build_labels(self, entry: LogEntry) -> Dict[str, str]:
        labels = dict(self._labels)
        metadata = entry.metadata
        if metadata.scope is not None and metadata.scope.value:
            labels["scope"] = metadata.scope.value
        if metadata.filename:
            labels["filename"] = metadata.filename
        if metadata.error is not None and metadata.error.get("name"):
            labels["error_type"] = metadata.error["name"]
        if is_structured(metadata.context):
            flatten_to_labels(labels, metadata.context, CONTEXT_LABEL_PREFIX)
        return labels


def map_severity(level: str) -> GcpSeverity:
    return LEVEL_TO_GCP_SEVERITY.get(level, GcpSeverity.DEFAULT)


def _error_info(error: Mapping[str, Any]) -> Dict[str, Any]:
    info = {key: error.get(key) for key in _ERROR_CORE_FIELDS}
    info.update({k: v for k, v in error.items() if k not in _ERROR_CORE_FIELDS})
    return encodable_error(info)
