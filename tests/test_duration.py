from datetime import timedelta

import numpy as np
import pytest

from durspan.duration import ZERO, Duration
from durspan.units import MAX_SECONDS


def test_constructor_validates_fields() -> None:
    assert Duration() == ZERO
    with pytest.raises(ValueError):
        Duration(-1, 0)
    with pytest.raises(ValueError):
        Duration(0, 1_000_000_000)
    with pytest.raises(ValueError):
        Duration(MAX_SECONDS + 1, 0)
    with pytest.raises(TypeError):
        Duration(1.5, 0)


def test_addition_carries_nanos() -> None:
    assert Duration(1, 600_000_000) + Duration(2, 500_000_000) == Duration(4, 100_000_000)
    assert sum([Duration(1, 0), Duration(2, 0)]) == Duration(3, 0)


def test_addition_overflow_raises() -> None:
    with pytest.raises(OverflowError):
        Duration(MAX_SECONDS, 999_999_999) + Duration(0, 1)


def test_ordering_and_hashing() -> None:
    assert Duration(1, 0) < Duration(1, 1) < Duration(2, 0)
    assert len({Duration(5, 0), Duration(5, 0), Duration(5, 1)}) == 2
    assert not ZERO
    assert Duration(0, 1)


def test_nanos_round_trip() -> None:
    d = Duration.from_nanos(90_000_000_123)
    assert d == Duration(90, 123)
    assert d.total_nanos == 90_000_000_123
    assert d.total_seconds() == pytest.approx(90.000000123)
    with pytest.raises(ValueError):
        Duration.from_nanos(-1)


def test_timedelta_conversion_truncates_to_microseconds() -> None:
    d = Duration(3_600, 1_500)
    assert d.to_timedelta() == timedelta(hours=1, microseconds=1)
    assert Duration.from_timedelta(timedelta(days=1, microseconds=7)) == Duration(86_400, 7_000)
    with pytest.raises(ValueError):
        Duration.from_timedelta(timedelta(seconds=-1))
    with pytest.raises(OverflowError):
        Duration(MAX_SECONDS, 0).to_timedelta()


def test_timedelta64_conversion_is_exact() -> None:
    d = Duration(8, 640_000_001)
    value = d.to_timedelta64()
    assert value == np.timedelta64(8_640_000_001, "ns")
    assert Duration.from_timedelta64(value) == d
    assert Duration.from_timedelta64(np.timedelta64(2, "h")) == Duration(7_200, 0)
    with pytest.raises(OverflowError):
        Duration(MAX_SECONDS, 0).to_timedelta64()


def test_parse_and_str() -> None:
    d = Duration.parse("2h and 15m")
    assert d == Duration(8_100, 0)
    assert str(d) == "2h 15m"
