import pytest

from durspan.duration import Duration
from durspan.formatting import format_duration


@pytest.mark.parametrize(
    "seconds,nanos,text",
    [
        (0, 0, "0s"),
        (1, 0, "1s"),
        (60, 0, "1m"),
        (8_100, 0, "2h 15m"),
        (86_400, 0, "1day"),
        (172_920, 0, "2days 2m"),
        (2_630_016, 0, "1month"),
        (31_557_600, 0, "1year"),
        (2 * 31_557_600 + 2 * 2_630_016, 0, "2years 2months"),
        (0, 32_000_000, "32ms"),
        (1_200, 17, "20m 17ns"),
        (0, 1_002_003, "1ms 2us 3ns"),
    ],
)
def test_format_duration(seconds: int, nanos: int, text: str) -> None:
    assert format_duration(Duration(seconds, nanos)) == text


def test_week_is_not_a_formatting_unit() -> None:
    assert format_duration(Duration(604_800, 0)) == "7days"
