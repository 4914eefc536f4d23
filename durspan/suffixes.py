"""Unit suffix table and resolver.

Families are tried in a fixed order so that a longer or rarer spelling is
never shadowed by a shorter one: the month family (``M``) goes before
minutes (``m``), and days/weeks/years go before the sub-second families
and ``s``.  Within a family the longest spelling comes first.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from durspan.units import Unit

_FAMILIES: List[Tuple[Unit, Tuple[str, ...]]] = [
    (Unit.MONTH, ("months", "month", "mths", "mth", "M")),
    (Unit.DAY, ("days", "day", "dys", "dy", "d", "D")),
    (Unit.WEEK, ("weeks", "week", "wks", "wk", "w", "W")),
    (Unit.YEAR, ("years", "year", "yrs", "yr", "y", "Y")),
    (Unit.NANOSECOND, ("nanos", "nsec", "ns")),
    (Unit.MICROSECOND, ("micros", "usec", "us")),
    (Unit.MILLISECOND, ("millis", "msec", "ms")),
    (Unit.SECOND, ("seconds", "second", "secs", "sec", "s")),
    (Unit.MINUTE, ("minutes", "minute", "mins", "min", "m")),
    (Unit.HOUR, ("hours", "hour", "hrs", "hr", "h", "H")),
]

SUFFIXES: Tuple[Tuple[str, Unit], ...] = tuple(
    (suffix, unit) for unit, spellings in _FAMILIES for suffix in spellings
)


def suffixes_for(unit: Unit) -> Tuple[str, ...]:
    """Return the accepted spellings of ``unit``, longest first."""
    for family_unit, spellings in _FAMILIES:
        if family_unit is unit:
            return spellings
    raise KeyError(unit)


def resolve_suffix(text: str, pos: int = 0) -> Optional[Tuple[Unit, int]]:
    """Match a unit suffix at ``text[pos:]``.

    Returns ``(unit, end)`` where ``end`` is the index just past the suffix,
    or ``None`` when no known suffix starts at ``pos``.  Matching is
    case-sensitive and does not require a word boundary after the suffix.
    """
    for suffix, unit in SUFFIXES:
        if text.startswith(suffix, pos):
            return unit, pos + len(suffix)
    return None
