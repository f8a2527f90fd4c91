"""Escaping of Python values into SQL literal text.

Strings are single-quoted with control characters, quotes and backslashes
backslash-escaped.
"""

import json
import math
import re
from datetime import date, datetime, timedelta, timezone as dt_timezone
from decimal import Decimal
from typing import Any, Optional

CHARS_PATTERN = re.compile("[\0\b\t\n\r\x1a\"'\\\\]")
CHARS_MAP = {
    "\0": "\\0",
    "\b": "\\b",
    "\t": "\\t",
    "\n": "\\n",
    "\r": "\\r",
    "\x1a": "\\Z",
    '"': '\\"',
    "'": "\\'",
    "\\": "\\\\",
}

# Sign, hours and optional minutes, e.g. "+05:30", "-08", "+0200".
TIMEZONE_PATTERN = re.compile(r"([+\-\s])(\d\d):?(\d\d)?")

NON_FINITE_LITERALS = {"nan": "'NaN'", "inf": "'Infinity'", "-inf": "'-Infinity'"}

LOCAL_TIMEZONE = "local"
UTC_TIMEZONE = "Z"


def escape_literal(value: Any, timezone: str = UTC_TIMEZONE) -> str:
    """Convert a single value into SQL literal text.

    Args:
        value: Value to escape
        timezone: ``"local"``, ``"Z"`` or a UTC offset such as ``"+05:30"``;
            only used for dates

    Returns:
        SQL literal text

    Examples:
        >>> escape_literal(None)
        'NULL'
        >>> escape_literal("it's")
        "'it\\\\'s'"
        >>> escape_literal(b"\\x01\\xff")
        "X'01ff'"
    """
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (float, Decimal)):
        return number_to_string(value)
    if isinstance(value, (datetime, date)):
        return escape_string(date_to_string(value, timezone))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return buffer_to_string(value)
    if isinstance(value, str):
        return escape_string(value)
    return json.dumps(value, separators=(",", ":"), default=str)


def escape_string(value: str) -> str:
    """Wrap a string in single quotes, backslash-escaping special characters."""
    if not CHARS_PATTERN.search(value):
        return f"'{value}'"
    escaped = CHARS_PATTERN.sub(lambda m: CHARS_MAP[m.group(0)], value)
    return f"'{escaped}'"


def number_to_string(value) -> str:
    """Format a float or Decimal as plain decimal text.

    Integral values drop the fractional part and exponents are expanded, so
    ``1.0`` gives ``1`` and ``1e+20`` gives ``100000000000000000000``.
    NaN and infinities have no numeric SQL literal; they render as the
    quoted strings ``'NaN'``, ``'Infinity'`` and ``'-Infinity'``, which
    PostgreSQL and DuckDB cast to floats.
    """
    if isinstance(value, float):
        if not math.isfinite(value):
            return NON_FINITE_LITERALS[str(value)]
        if value.is_integer():
            return str(int(value))
        value = Decimal(repr(value))
    if not value.is_finite():
        key = "nan" if value.is_nan() else ("-inf" if value < 0 else "inf")
        return NON_FINITE_LITERALS[key]
    if value == value.to_integral_value():
        return str(int(value))
    return format(value, "f")


def buffer_to_string(value) -> str:
    """Hex-encode binary data as an ``X'..'`` literal."""
    return f"X'{bytes(value).hex()}'"


def date_to_string(value: date, timezone: str = UTC_TIMEZONE) -> str:
    """Format a date as ``YYYY-MM-DD HH:MM:SS.mmm``.

    Naive datetimes are read as UTC instants and a plain ``date`` as UTC
    midnight. With ``timezone="local"`` the wall-clock time of the host is
    used, otherwise the UTC time shifted by the parsed offset. A shift past
    the supported range (years 1 to 9999) clamps to ``datetime.min`` or
    ``datetime.max``.

    Args:
        value: Date or datetime to format
        timezone: ``"local"``, ``"Z"`` or a UTC offset

    Returns:
        Formatted date text (unquoted)
    """
    try:
        moment = _shift_date(value, timezone)
    except OverflowError:
        moment = datetime.max if value.year > 1 else datetime.min

    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}."
        f"{moment.microsecond // 1000:03d}"
    )


def convert_timezone(timezone: Optional[str]) -> Optional[float]:
    """Parse a timezone option into an offset in minutes.

    Returns:
        Offset in minutes, or ``None`` when the text is not a recognized offset
    """
    if timezone == UTC_TIMEZONE:
        return 0
    if not isinstance(timezone, str):
        return None
    match = TIMEZONE_PATTERN.search(timezone)
    if not match:
        return None
    sign = -1 if match.group(1) == "-" else 1
    hours = int(match.group(2))
    minutes = int(match.group(3)) if match.group(3) else 0
    return sign * (hours + minutes / 60) * 60


def _shift_date(value: date, timezone: str) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            instant = value.replace(tzinfo=dt_timezone.utc)
        else:
            instant = value.astimezone(dt_timezone.utc)
    else:
        instant = datetime(value.year, value.month, value.day, tzinfo=dt_timezone.utc)

    if timezone == LOCAL_TIMEZONE:
        return instant.astimezone()
    offset = convert_timezone(timezone)
    if offset:
        return instant + timedelta(minutes=offset)
    return instant
