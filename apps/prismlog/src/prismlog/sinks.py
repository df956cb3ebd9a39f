"""
Line sinks.

A sink receives each fully rendered line. Transport beyond writing the line
(files, network) belongs to the host application.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, Union

WriteLine = Callable[[str], Any]


class BaseSink(ABC):
    """Abstract base class for line sinks."""

    @abstractmethod
    def emit(self, line: str) -> None:
        """Write one rendered line."""
        ...

    def close(self) -> None:
        """Release resources held by the sink."""

    def __call__(self, line: str) -> None:
        self.emit(line)


class StdioSink(BaseSink):
    """Writes lines to a text stream (default: stdout)."""

    def __init__(self, stream: Any = None):
        self._stream = stream

    @property
    def stream(self) -> Any:
        # Resolved lazily so stream redirection (e.g. pytest capsys) is honored
        return self._stream or sys.stdout

    def emit(self, line: str) -> None:
        self.stream.write(line + "\n")
        self.stream.flush()


class CallableSink(BaseSink):
    """Adapts a plain ``write_line`` callable."""

    def __init__(self, write_line: WriteLine):
        self._write_line = write_line

    def emit(self, line: str) -> None:
        self._write_line(line)


SinkLike = Union[BaseSink, WriteLine]


def as_sink(sink: SinkLike | None) -> BaseSink:
    if sink is None:
        return StdioSink()
    if isinstance(sink, BaseSink):
        return sink
    return CallableSink(sink)
