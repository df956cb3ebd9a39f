"""
Logger instance options.

Each Logger owns one ``LoggerOptions``. Only ``level`` is expected to change
after construction (via ``Logger.set_level``); assignments are re-validated.
"""

from __future__ import annotations

from typing import Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..colors import is_hex_color
from ..constants import NAMED_COLORS

LogFormat = Literal["gcp", "cloud", "json", "prettyJson", "cli", "browser"]

CLOUD_FORMATS: frozenset[str] = frozenset({"gcp", "cloud"})


class PrefixOptions(BaseModel):
    """Scope label shown in front of every console line."""

    model_config = ConfigDict(frozen=True)

    value: str
    color: Optional[str] = Field(default=None, description="Palette name (e.g. blue_400) or hex color")

    @field_validator("color")
    @classmethod
    def _check_color(cls, v: Optional[str]) -> Optional[str]:
        if v is None or v in NAMED_COLORS or is_hex_color(v):
            return v
        raise ValueError(f"color must be a palette name or hex color, got {v!r}")


class GcpResource(BaseModel):
    """Monitored resource descriptor attached to cloud entries."""

    model_config = ConfigDict(frozen=True)

    type: str
    labels: Dict[str, str] = Field(default_factory=dict)


class GcpOptions(BaseModel):
    """Cloud Logging specific options."""

    model_config = ConfigDict(frozen=True)

    project_id: Optional[str] = None
    resource: Optional[GcpResource] = None
    labels: Optional[Dict[str, str]] = None
    enable_tracing: bool = False
    enable_source_location: bool = True
    detect_resource: bool = Field(default=False, description="Detect the resource from the environment when unset")


class LoggerOptions(BaseModel):
    """Configuration for a single Logger."""

    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    prefix: Optional[PrefixOptions] = None
    filename: Optional[str] = None
    level: Optional[str] = Field(default=None, description="Filter floor; unknown keys mute the logger")
    timestamp: Optional[Union[bool, str]] = Field(
        default=None,
        description="ISO8601, RFC3339, locale, unix, a strftime pattern, or a bool",
    )
    format: Optional[LogFormat] = None
    gcp: GcpOptions = Field(default_factory=GcpOptions)

    @property
    def is_cloud_format(self) -> bool:
        return self.format in CLOUD_FORMATS
