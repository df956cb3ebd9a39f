"""
Plugin pipeline.

An ordered, named set of entry transforms. Registering a name that already
exists removes the old transform and appends the new one, so re-registration
moves a plugin to the end of the order.

A single process-wide registry is shared by every Logger unless one is
injected explicitly. Registration is not synchronized; hosts that register
from several threads must serialize those calls.
"""

from __future__ import annotations

from typing import Iterable

from .types import LogEntry, LoggerPlugin


class PluginRegistry:
    """Ordered collection of LoggerPlugins."""

    def __init__(self, plugins: Iterable[LoggerPlugin] = ()):
        self._plugins: list[LoggerPlugin] = []
        for plugin in plugins:
            self.add(plugin)

    def add(self, plugin: LoggerPlugin) -> None:
        self._plugins = [p for p in self._plugins if p.name != plugin.name]
        self._plugins.append(plugin)

    def apply(self, entry: LogEntry) -> LogEntry:
        """Run the entry through every plugin in registration order."""
        for plugin in self._plugins:
            entry = plugin.process_entry(entry)
        return entry

    def clear(self) -> None:
        self._plugins = []

    @property
    def names(self) -> list[str]:
        return [p.name for p in self._plugins]

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: object) -> bool:
        return any(p.name == name for p in self._plugins)


# =============================================================================
# Process-wide Registry
# =============================================================================

_registry = PluginRegistry()


def get_plugin_registry() -> PluginRegistry:
    return _registry


def reset_plugin_registry() -> None:
    """Drop every globally registered plugin (test isolation)."""
    _registry.clear()
