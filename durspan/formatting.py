"""
Canonical text rendering of durations.

The output is always accepted by :func:`durspan.grammar.parse_duration`,
e.g. ``"1year 2months 3days 4h 5m 6s 7ms 8us 9ns"``.
"""
from __future__ import annotations

from typing import List

from durspan.duration import Duration

SECONDS_PER_YEAR = 31_557_600  # 365.25 days
SECONDS_PER_MONTH = 2_630_016  # 30.44 days
SECONDS_PER_DAY = 86_400


def _item_plural(parts: List[str], name: str, value: int) -> None:
    if value > 0:
        parts.append(f"{value}{name}{'s' if value > 1 else ''}")


def _item(parts: List[str], name: str, value: int) -> None:
    if value > 0:
        parts.append(f"{value}{name}")


def format_duration(duration: Duration) -> str:
    """
    Format a duration as space-separated unit items, largest first.

    Args:
        duration: Value to render.

    Returns:
        Canonical text such as "2h 15m", or "0s" for the zero duration.
    """
    secs = duration.seconds
    nanos = duration.nanos
    if secs == 0 and nanos == 0:
        return "0s"

    years, ydays = divmod(secs, SECONDS_PER_YEAR)
    months, mdays = divmod(ydays, SECONDS_PER_MONTH)
    days, day_secs = divmod(mdays, SECONDS_PER_DAY)

    parts: List[str] = []
    _item_plural(parts, "year", years)
    _item_plural(parts, "month", months)
    _item_plural(parts, "day", days)
    _item(parts, "h", day_secs // 3600)
    _item(parts, "m", day_secs % 3600 // 60)
    _item(parts, "s", day_secs % 60)
    _item(parts, "ms", nanos // 1_000_000)
    _item(parts, "us", nanos // 1_000 % 1_000)
    _item(parts, "ns", nanos % 1_000)
    return " ".join(parts)
