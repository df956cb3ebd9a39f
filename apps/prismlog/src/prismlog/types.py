"""
Canonical log entry records and the plugin contract.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config.options import PrefixOptions


@dataclass(frozen=True)
class EntryMetadata:
    """Everything about a log call besides level, time and message.

    ``error`` holds ``name``, ``message`` and ``stack`` plus any public
    attributes the exception carried. ``extra`` is free space for plugins.
    """

    context: Any = None
    scope: Optional[PrefixOptions] = None
    filename: Optional[str] = None
    error: Optional[Dict[str, Any]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def has_context(self) -> bool:
        """Context counts as present unless missing or an empty string."""
        return self.context is not None and not (isinstance(self.context, str) and not self.context)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.context is not None:
            data["context"] = self.context
        if self.scope is not None:
            data["scope"] = self.scope.model_dump(exclude_none=True)
        if self.filename is not None:
            data["filename"] = self.filename
        if self.error is not None:
            data["error"] = self.error
        data.update(self.extra)
        return data


@dataclass(frozen=True)
class LogEntry:
    """A normalized, format-independent record of one logging call."""

    level: str
    timestamp: str
    message: str
    metadata: EntryMetadata = field(default_factory=EntryMetadata)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level": self.level,
            "timestamp": self.timestamp,
            "message": self.message,
            "metadata": self.metadata.to_dict(),
        }


EntryProcessor = Callable[[LogEntry], LogEntry]


@dataclass(frozen=True)
class LoggerPlugin:
    """A named transform applied to every entry before rendering."""

    name: str
    process_entry: EntryProcessor
    version: str = "1.0.0"
