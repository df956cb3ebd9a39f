"""
Monitored resource detection from platform environment variables.

Precedence when several platforms' signals are present: Compute Engine,
GKE, Cloud Run, Cloud Functions, App Engine.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .types import GCP_RESOURCE_TYPES, GcpResource

UNKNOWN = "unknown"


@dataclass
class GcpEnvironmentInfo:
    project_id: Optional[str] = None
    region: Optional[str] = None
    zone: Optional[str] = None
    service_account: Optional[str] = None
    instance_id: Optional[str] = None
    cluster_name: Optional[str] = None
    namespace: Optional[str] = None
    pod_name: Optional[str] = None
    container_name: Optional[str] = None
    revision_name: Optional[str] = None
    function_name: Optional[str] = None
    version_id: Optional[str] = None


class GcpResourceDetector:
    """Infers a GcpResource from an environment mapping (``os.environ`` by default)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def environment_info(self) -> GcpEnvironmentInfo:
        env = self._environ
        info = GcpEnvironmentInfo()

        info.project_id = env.get("GOOGLE_CLOUD_PROJECT") or env.get("GCLOUD_PROJECT")

        # Compute Engine
        if env.get("GCE_INSTANCE_ID"):
            info.instance_id = env["GCE_INSTANCE_ID"]
        if env.get("GCE_INSTANCE_ZONE"):
            # Zone may be a full path: projects/<n>/zones/<zone>
            info.zone = env["GCE_INSTANCE_ZONE"].split("/")[-1]

        # GKE
        if env.get("KUBERNETES_SERVICE_HOST"):
            info.cluster_name = env.get("GKE_CLUSTER_NAME") or UNKNOWN
            info.namespace = env.get("KUBERNETES_NAMESPACE") or "default"
            info.pod_name = env.get("HOSTNAME") or env.get("KUBERNETES_POD_NAME")
            info.container_name = env.get("KUBERNETES_CONTAINER_NAME") or "main"

        # Cloud Run
        if env.get("K_REVISION"):
            info.revision_name = env["K_REVISION"]
        if env.get("K_SERVICE"):
            info.function_name = env["K_SERVICE"]
        if env.get("K_REGION"):
            info.region = env["K_REGION"]

        # Cloud Functions
        if env.get("FUNCTION_NAME"):
            info.function_name = env["FUNCTION_NAME"]
        if env.get("FUNCTION_REGION"):
            info.region = env["FUNCTION_REGION"]

        # App Engine
        if env.get("GAE_VERSION"):
            info.version_id = env["GAE_VERSION"]
        if env.get("GAE_SERVICE"):
            info.function_name = env["GAE_SERVICE"]

        if env.get("GOOGLE_APPLICATION_CREDENTIALS"):
            info.service_account = env["GOOGLE_APPLICATION_CREDENTIALS"]

        return info

    def detect_resource(self) -> Optional[GcpResource]:
        info = self.environment_info()
        project_id = info.project_id or UNKNOWN

        if info.instance_id:
            return GcpResource(
                type=GCP_RESOURCE_TYPES["GCE_INSTANCE"],
                labels={
                    "instance_id": info.instance_id,
                    "zone": info.zone or UNKNOWN,
                    "project_id": project_id,
                },
            )

        if info.cluster_name and info.pod_name:
            return GcpResource(
                type=GCP_RESOURCE_TYPES["GKE_CONTAINER"],
                labels={
                    "cluster_name": info.cluster_name,
                    "namespace_name": info.namespace or "default",
                    "pod_name": info.pod_name,
                    "container_name": info.container_name or "main",
                    "project_id": project_id,
                    "location": info.zone or info.region or UNKNOWN,
                },
            )

        if info.revision_name:
            service = info.revision_name.split("-")[0] or UNKNOWN
            return GcpResource(
                type=GCP_RESOURCE_TYPES["CLOUD_RUN_REVISION"],
                labels={
                    "service_name": service,
                    "revision_name": info.revision_name,
                    "configuration_name": service,
                    "project_id": project_id,
                    "location": info.region or UNKNOWN,
                },
            )

        if info.function_name and not info.version_id:
            return GcpResource(
                type=GCP_RESOURCE_TYPES["CLOUD_FUNCTION"],
                labels={
                    "function_name": info.function_name,
                    "project_id": project_id,
                    "region": info.region or UNKNOWN,
                },
            )

        if info.version_id:
            return GcpResource(
                type=GCP_RESOURCE_TYPES["APP_ENGINE_VERSION"],
                labels={
                    "module_id": info.function_name or "default",
                    "version_id": info.version_id,
                    "project_id": project_id,
                },
            )

        return None

    def default_labels(self) -> dict[str, str]:
        info = self.environment_info()
        labels: dict[str, str] = {}
        if info.project_id:
            labels["project_id"] = info.project_id
        if info.region:
            labels["region"] = info.region
        if info.zone:
            labels["zone"] = info.zone
        if self._environ.get("PRISMLOG_ENV"):
            labels["environment"] = self._environ["PRISMLOG_ENV"]
        if self._environ.get("SERVICE_NAME"):
            labels["service"] = self._environ["SERVICE_NAME"]
        return labels

    def is_gcp_environment(self) -> bool:
        env = self._environ
        return any(
            env.get(name)
            for name in ("GOOGLE_CLOUD_PROJECT", "GCE_INSTANCE_ID", "K_REVISION", "FUNCTION_NAME", "GAE_VERSION")
        )
