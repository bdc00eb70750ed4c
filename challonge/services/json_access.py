"""Primitives for pulling typed values out of a decoded JSON tree.

``as_object`` and ``take_required`` are the only ones that raise; the
``read_*`` helpers return ``None`` when the value has the wrong shape so the
caller can pick its own default.
"""
from typing import Any, Dict, Optional

from challonge.core.errors import DecodeError

U64_MAX = 2 ** 64 - 1


def as_object(value: Any) -> Dict[str, Any]:
    """Returns a private copy of ``value`` if it is a JSON object."""
    if not isinstance(value, dict):
        raise DecodeError("Expected object", value)
    return dict(value)


def take_required(obj: Dict[str, Any], key: str) -> Any:
    """Removes ``key`` from ``obj`` and returns its value."""
    try:
        return obj.pop(key)
    except KeyError:
        raise DecodeError("Unexpected absent key", key) from None


def read_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    return None


def read_u64(value: Any) -> Optional[int]:
    # bool is a subclass of int but is not a JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if 0 <= value <= U64_MAX:
        return value
    return None


def read_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    return None


def read_quoted_float(value: Any) -> Optional[float]:
    """Parses a number the service sends as a string, e.g. ``"0.5"``.

    Native JSON numbers are rejected.
    """
    text = read_str(value)
    if text is None or not text.isascii() or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None
