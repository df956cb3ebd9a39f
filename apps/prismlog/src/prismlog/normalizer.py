"""
Entry normalization.

Level methods accept ``(message)``, ``(message, error)``, ``(message,
context)``, ``(message, error, context)``, ``(error)``, ``(error, context)`` and
``(context)``. This module resolves those shapes into one canonical entry.
"""

from __future__ import annotations

import traceback
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from .config.options import PrefixOptions
from .constants import PLACEHOLDER_MESSAGE
from .types import EntryMetadata, LogEntry


class ArgumentKind(Enum):
    MESSAGE = "message"
    ERROR = "error"
    ABSENT = "absent"
    CONTEXT = "context"


def classify(value: Any) -> ArgumentKind:
    if isinstance(value, str):
        return ArgumentKind.MESSAGE
    if isinstance(value, BaseException):
        return ArgumentKind.ERROR
    if value is None:
        return ArgumentKind.ABSENT
    return ArgumentKind.CONTEXT


@dataclass(frozen=True)
class ResolvedArguments:
    message: Optional[str] = None
    error: Optional[BaseException] = None
    context: Any = None


def resolve_arguments(arg1: Any = None, arg2: Any = None, arg3: Any = None) -> ResolvedArguments:
    """Map positional call arguments onto (message, error, context)."""
    kind = classify(arg1)
    if kind is ArgumentKind.MESSAGE:
        if classify(arg2) is ArgumentKind.ERROR:
            return ResolvedArguments(message=arg1, error=arg2, context=arg3)
        return ResolvedArguments(message=arg1, context=arg2)
    if kind is ArgumentKind.ERROR:
        return ResolvedArguments(error=arg1, context=arg2)
    # ABSENT and CONTEXT both treat arg1 as the (possibly missing) context
    return ResolvedArguments(context=arg1)


def format_stack(error: BaseException) -> str:
    """Traceback text for an exception, header line included."""
    lines = traceback.format_exception(type(error), error, error.__traceback__)
    return "".join(lines).rstrip("\n")


def extract_error_metadata(error: BaseException) -> Dict[str, Any]:
    """Capture name, message, stack and the public attributes of an exception."""
    metadata: Dict[str, Any] = {
        "name": type(error).__name__,
        "message": str(error),
        "stack": format_stack(error),
    }
    for key, value in vars(error).items():
        if key.startswith("__") or key in ("name", "stack"):
            continue
        metadata[key] = value
    return metadata


def default_message(message: Optional[str], error: Optional[BaseException], context: Any) -> str:
    if message:
        return message
    if error is not None:
        return str(error)
    if context is not None:
        return ""
    return PLACEHOLDER_MESSAGE


def build_entry(
    level: str,
    timestamp: str,
    resolved: ResolvedArguments,
    *,
    scope: Optional[PrefixOptions] = None,
    filename: Optional[str] = None,
) -> LogEntry:
    """Assemble the canonical entry for already-resolved arguments."""
    error = resolved.error
    return LogEntry(
        level=level,
        timestamp=timestamp,
        message=default_message(resolved.message, error, resolved.context),
        metadata=EntryMetadata(
            context=resolved.context,
            scope=scope,
            filename=filename,
            error=extract_error_metadata(error) if error is not None else None,
        ),
    )
