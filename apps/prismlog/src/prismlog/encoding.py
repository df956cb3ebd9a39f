"""
JSON serialization.

No ``default`` hook is installed for entries: values orjson cannot encode in
a caller's context (and cyclic structures) raise ``orjson.JSONEncodeError``
to the caller. Fields lifted off a logged exception are the exception:
``encodable_error`` converts them so the error itself always renders.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

import orjson

_BASE_OPTIONS = orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS


def orjson_dumps(v: Any, *, default: Any = None) -> str:
    """Compact JSON text."""
    return orjson.dumps(v, default=default, option=_BASE_OPTIONS).decode()


def orjson_pretty(v: Any) -> str:
    """JSON text indented with two spaces."""
    return orjson.dumps(v, option=_BASE_OPTIONS | orjson.OPT_INDENT_2).decode()


def _error_default(obj: Any) -> Any:
    if isinstance(obj, (bytes, bytearray)):
        return bytes(obj).decode("utf-8", errors="replace")
    return repr(obj)


def _encodable(value: Any) -> Any:
    try:
        orjson.dumps(value, option=_BASE_OPTIONS)
        return value
    except orjson.JSONEncodeError:
        pass
    try:
        return orjson.loads(orjson_dumps(value, default=_error_default))
    except orjson.JSONEncodeError:
        # Cycles survive the default hook
        return repr(value)


def encodable_error(error: Mapping[str, Any]) -> Dict[str, Any]:
    """Error metadata with every value orjson cannot encode converted.

    Bytes are decoded as UTF-8 (invalid sequences replaced); anything else
    becomes its ``repr``.
    """
    return {key: _encodable(value) for key, value in error.items()}
