import pytest

from prismlog.console import reset_console
from prismlog.formatters import ConsoleFormatter
from prismlog.plugins import reset_plugin_registry


@pytest.fixture(autouse=True)
def isolate_globals():
    """
    Resets process-wide state (plugin registry, console facade, console
    layout) around every test so registrations never leak between tests.
    """
    reset_plugin_registry()
    reset_console()
    saved = (ConsoleFormatter.BOX_CHARS, ConsoleFormatter.CONTEXT_WIDTH, ConsoleFormatter.PREFIX_SEPARATOR)
    yield
    reset_plugin_registry()
    reset_console()
    ConsoleFormatter.BOX_CHARS, ConsoleFormatter.CONTEXT_WIDTH, ConsoleFormatter.PREFIX_SEPARATOR = saved


@pytest.fixture
def lines():
    """Collects rendered lines; pass ``lines.append`` as a Logger sink."""
    return []
