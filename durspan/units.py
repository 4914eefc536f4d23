"""Catalog of time units and their fixed conversion factors to seconds."""

from __future__ import annotations

from enum import Enum

NANO_TO_SECOND = 1e-9
MICRO_TO_SECOND = 1e-6
MILLIS_TO_SECOND = 1e-3
SECOND_TO_SECOND = 1.0
MINUTE_TO_SECOND = 60.0
HOUR_TO_SECOND = 3600.0
DAY_TO_SECOND = 86_400.0
WEEK_TO_SECOND = 604_800.0
# Calendar approximations, not calendar-aware.
MONTH_TO_SECOND = 30.44 * 86_400.0
YEAR_TO_SECOND = 365.25 * 86_400.0

NANOS_PER_SECOND = 1_000_000_000
MAX_SECONDS = 2**64 - 1


class Unit(Enum):
    """Time units understood by the duration grammar.

    Each member carries its factor to seconds as the enum value, so
    ``Unit.HOUR.value == 3600.0``.
    """

    NANOSECOND = NANO_TO_SECOND
    MICROSECOND = MICRO_TO_SECOND
    MILLISECOND = MILLIS_TO_SECOND
    SECOND = SECOND_TO_SECOND
    MINUTE = MINUTE_TO_SECOND
    HOUR = HOUR_TO_SECOND
    DAY = DAY_TO_SECOND
    WEEK = WEEK_TO_SECOND
    MONTH = MONTH_TO_SECOND
    YEAR = YEAR_TO_SECOND

    @property
    def seconds(self) -> float:
        return self.value

    def to_seconds(self, amount: float) -> float:
        """Return ``amount`` of this unit expressed in (fractional) seconds."""
        return amount * self.value
