"""
Google Cloud Logging wire types.

References:
    https://cloud.google.com/logging/docs/reference/v2/rest/v2/LogEntry
    https://cloud.google.com/logging/docs/reference/v2/rest/v2/MonitoredResource
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from ..config.options import GcpResource
from ..levels import (
    LEVEL_CRITICAL_KEY,
    LEVEL_DEBUG_KEY,
    LEVEL_ERROR_KEY,
    LEVEL_INFO_KEY,
    LEVEL_RAINBOW_KEY,
    LEVEL_SECURITY_ALERT_KEY,
    LEVEL_SUCCESS_KEY,
    LEVEL_TRACE_KEY,
    LEVEL_WARN_KEY,
)


class GcpSeverity(str, Enum):
    DEFAULT = "DEFAULT"
    DEBUG = "DEBUG"
    INFO = "INFO"
    NOTICE = "NOTICE"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
    ALERT = "ALERT"
    EMERGENCY = "EMERGENCY"


LEVEL_TO_GCP_SEVERITY: Dict[str, GcpSeverity] = {
    LEVEL_SECURITY_ALERT_KEY: GcpSeverity.ALERT,
    LEVEL_CRITICAL_KEY: GcpSeverity.CRITICAL,
    LEVEL_ERROR_KEY: GcpSeverity.ERROR,
    LEVEL_WARN_KEY: GcpSeverity.WARNING,
    LEVEL_SUCCESS_KEY: GcpSeverity.INFO,
    LEVEL_INFO_KEY: GcpSeverity.INFO,
    LEVEL_DEBUG_KEY: GcpSeverity.DEBUG,
    LEVEL_TRACE_KEY: GcpSeverity.DEBUG,
    LEVEL_RAINBOW_KEY: GcpSeverity.INFO,
}


GCP_RESOURCE_TYPES = {
    "GCE_INSTANCE": "gce_instance",
    "GKE_CONTAINER": "k8s_container",
    "CLOUD_RUN_REVISION": "cloud_run_revision",
    "CLOUD_FUNCTION": "cloud_function",
    "APP_ENGINE_VERSION": "gae_app",
    "CLOUD_SQL_INSTANCE": "cloudsql_database",
    "DATAFLOW_JOB": "dataflow_job",
    "CLOUD_BUILD_BUILD": "cloud_build",
    "CLOUD_TASK_QUEUE": "cloud_task_queue",
    "CLOUD_SCHEDULER_JOB": "cloud_scheduler_job",
}


@dataclass(frozen=True)
class GcpLogEntry:
    """A Cloud Logging LogEntry. Exactly one payload field is set."""

    severity: GcpSeverity
    timestamp: str
    text_payload: Optional[str] = None
    json_payload: Optional[Dict[str, Any]] = None
    resource: Optional[GcpResource] = None
    labels: Optional[Dict[str, str]] = None
    trace: Optional[str] = None
    span_id: Optional[str] = None
    trace_sampled: Optional[bool] = None
    source_location: Optional[Dict[str, str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Wire shape with camelCase keys; unset fields are omitted."""
        data: Dict[str, Any] = {
            "severity": self.severity.value,
            "timestamp": self.timestamp,
        }
        if self.text_payload is not None:
            data["textPayload"] = self.text_payload
        if self.json_payload is not None:
            data["jsonPayload"] = self.json_payload
        if self.resource is not None:
            data["resource"] = self.resource.model_dump()
        if self.labels:
            data["labels"] = self.labels
        if self.trace is not None:
            data["trace"] = self.trace
        if self.span_id is not None:
            data["spanId"] = self.span_id
        if self.trace_sampled is not None:
            data["traceSampled"] = self.trace_sampled
        if self.source_location is not None:
            data["sourceLocation"] = self.source_location
        return data
