"""Exact, non-negative duration value: whole seconds plus nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

import numpy as np

from durspan.units import MAX_SECONDS, NANOS_PER_SECOND

_INT64_MAX = 2**63 - 1


@dataclass(frozen=True, order=True)
class Duration:
    """Elapsed time as ``seconds`` (unsigned 64-bit range) and ``nanos`` (< 1e9)."""

    seconds: int = 0
    nanos: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, int) or not isinstance(self.nanos, int):
            raise TypeError("Duration fields must be integers")
        if self.seconds < 0 or self.nanos < 0:
            raise ValueError("Duration cannot be negative")
        if self.nanos >= NANOS_PER_SECOND:
            raise ValueError(f"nanos must be below {NANOS_PER_SECOND}, got {self.nanos}")
        if self.seconds > MAX_SECONDS:
            raise ValueError(f"seconds exceed the representable range ({MAX_SECONDS})")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def parse(cls, text: str) -> "Duration":
        from durspan.grammar import parse_duration

        return parse_duration(text)

    @classmethod
    def from_nanos(cls, total: int) -> "Duration":
        if total < 0:
            raise ValueError("Duration cannot be negative")
        seconds, nanos = divmod(int(total), NANOS_PER_SECOND)
        if seconds > MAX_SECONDS:
            raise OverflowError("duration exceeds the representable range")
        return cls(seconds, nanos)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "Duration":
        if value < timedelta(0):
            raise ValueError("Duration cannot be negative")
        seconds = value.days * 86_400 + value.seconds
        return cls(seconds, value.microseconds * 1_000)

    @classmethod
    def from_timedelta64(cls, value: Any) -> "Duration":
        """Build from a ``numpy.timedelta64`` of any fixed unit."""
        ns = np.timedelta64(value).astype("timedelta64[ns]").astype(np.int64)
        return cls.from_nanos(int(ns))

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------
    @property
    def total_nanos(self) -> int:
        return self.seconds * NANOS_PER_SECOND + self.nanos

    def total_seconds(self) -> float:
        return self.seconds + self.nanos / NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        """Convert to ``datetime.timedelta``; sub-microsecond precision is truncated."""
        try:
            return timedelta(seconds=self.seconds, microseconds=self.nanos // 1_000)
        except OverflowError as exc:
            raise OverflowError(f"{self} does not fit in datetime.timedelta") from exc

    def to_timedelta64(self) -> np.timedelta64:
        """Convert exactly to ``numpy.timedelta64[ns]`` (int64 nanoseconds)."""
        total = self.total_nanos
        if total > _INT64_MAX:
            raise OverflowError(f"{self} does not fit in numpy.timedelta64[ns]")
        return np.timedelta64(total, "ns")

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        seconds = self.seconds + other.seconds
        nanos = self.nanos + other.nanos
        if nanos >= NANOS_PER_SECOND:
            seconds += 1
            nanos -= NANOS_PER_SECOND
        if seconds > MAX_SECONDS:
            raise OverflowError("overflow when adding durations")
        return Duration(seconds, nanos)

    def __radd__(self, other: object) -> "Duration":
        # Lets sum() start from its default 0.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __bool__(self) -> bool:
        return bool(self.seconds or self.nanos)

    def __str__(self) -> str:
        from durspan.formatting import format_duration

        return format_duration(self)


ZERO = Duration(0, 0)
