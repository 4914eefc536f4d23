"""
durspan: human-friendly duration text <-> exact seconds + nanoseconds.

    >>> from durspan import parse_duration, format_duration
    >>> parse_duration("2h and 15m")
    Duration(seconds=8100, nanos=0)
    >>> format_duration(parse_duration("90min"))
    '1h 30m'
"""
from __future__ import annotations

from durspan.duration import ZERO, Duration
from durspan.errors import DurationError, EmptyInput, MalformedSpan, ParseFailed, SpanErrorKind
from durspan.formatting import format_duration
from durspan.grammar import iter_spans, parse_duration
from durspan.units import MAX_SECONDS, Unit

__version__ = "0.1.0"

__all__ = [
    "Duration",
    "DurationError",
    "EmptyInput",
    "MAX_SECONDS",
    "MalformedSpan",
    "ParseFailed",
    "SpanErrorKind",
    "Unit",
    "ZERO",
    "format_duration",
    "iter_spans",
    "parse_duration",
]
