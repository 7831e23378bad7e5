"""Field extraction and value conversion for 'Label: value' lines."""

from __future__ import annotations

import re
from datetime import datetime

from dateutil import parser as dt_parser

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_THREAD_ID_RE = re.compile(r"^\s*(?P<num>[+-]?[0-9]+)\s*$")


class ExtractionError(ValueError):
    """Raised when a field line has no 'label: value' separator."""


def extract_value(line: str) -> str:
    """Return everything after the first colon, trimmed of spaces only.

    Tabs and other whitespace are kept; a colon inside the value is preserved.
    """
    idx = line.find(":")
    if idx < 0:
        raise ExtractionError(f"no ':' separator in field line: {line!r}")
    return line[idx + 1 :].strip(" ")


def parse_timestamp(value: str) -> datetime | None:
    """Parse a date/time string leniently; None if it is not a timestamp."""
    if not value.strip():
        return None
    try:
        ts = dt_parser.parse(value)
        # an out-of-range offset only fails once the tzinfo is consulted
        ts.utcoffset()
    except (ValueError, OverflowError):
        return None
    return ts


def parse_thread_id(value: str) -> int | None:
    """Parse a signed 32-bit integer; None if malformed or out of range."""
    m = _THREAD_ID_RE.match(value)
    if not m:
        return None
    num = m.group("num")
    if len(num.lstrip("+-0")) > 10:
        return None
    n = int(num)
    if n < _INT32_MIN or n > _INT32_MAX:
        return None
    return n
