import re
from datetime import datetime
from typing import Any, Optional

RFC3339_PATTERN = re.compile(
    r"^(?P<date>\d{4}-\d{2}-\d{2})[Tt ]"
    r"(?P<time>\d{2}:\d{2}):(?P<second>\d{2})(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|[+-]\d{2}:\d{2})$",
    re.ASCII,
)


def parse_rfc3339(text: str) -> Optional[datetime]:
    """Parses an offset-aware RFC 3339 date-time, e.g. 2015-01-19T16:57:17-05:00.

    Returns None for anything else, including naive date-times.
    """
    match = RFC3339_PATTERN.match(text)
    if not match:
        return None
    fraction = match.group("fraction") or "0"
    second = match.group("second")
    if second == "60":
        # leap second, held as the last representable instant of :59
        second, fraction = "59", "999999"
    offset = match.group("offset")
    if offset in ("Z", "z"):
        offset = "+00:00"
    # fromisoformat only takes up to microsecond precision
    normalized = f"{match.group('date')}T{match.group('time')}:{second}.{fraction[:6].ljust(6, '0')}{offset}"
    try:
        return datetime.fromisoformat(normalized)
    except ValueError:
        return None


def read_timestamp(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    return parse_rfc3339(value)
