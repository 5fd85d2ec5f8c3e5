"""Compact formatting of durations, showing only the largest unit."""

from __future__ import annotations

from datetime import timedelta

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MILLI = 1_000_000

_YEAR = 31_557_600  # 365.25 days
_MONTH = 2_630_016  # 30.44 days
_DAY = 86_400
_HOUR = 3_600
_MINUTE = 60


def format_duration(nanoseconds: int | timedelta) -> str:
    """Format a duration as its most significant unit, e.g. ``3h`` or ``12ms``.

    Accepts nanoseconds or a ``timedelta``. Negative durations count as zero.
    """
    if isinstance(nanoseconds, timedelta):
        nanoseconds = (nanoseconds // timedelta(microseconds=1)) * 1_000
    total = max(int(nanoseconds), 0)

    secs, nanos = divmod(total, _NANOS_PER_SECOND)
    years, rest = divmod(secs, _YEAR)
    months, rest = divmod(rest, _MONTH)
    days, rest = divmod(rest, _DAY)
    hours, rest = divmod(rest, _HOUR)
    minutes, seconds = divmod(rest, _MINUTE)
    millis = nanos // _NANOS_PER_MILLI

    parts = (
        ("y", years),
        ("mo", months),
        ("d", days),
        ("h", hours),
        ("m", minutes),
        ("s", seconds),
        ("ms", millis),
    )
    for unit, value in parts:
        if value > 0:
            return f"{value}{unit}"
    return "0s"