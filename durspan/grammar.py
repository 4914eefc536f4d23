"""Duration grammar: sums of ``<number><unit>`` spans.

Accepted input looks like ``"2h 15m"``, ``"1.5 mins"``, ``"20min17nsec"``
or ``"2 minutes and 30 seconds"``.  Each span is a non-negative decimal or
scientific literal, optional blanks, then a unit suffix (see
:mod:`durspan.suffixes`).  Spans may be separated by blanks or by the word
``and``.  The bare string ``"0"`` is the only unit-less input accepted.

Usage:
    from durspan.grammar import parse_duration

    parse_duration("2h 37min")    # Duration(seconds=9420, nanos=0)
    parse_duration("32ms")        # Duration(seconds=0, nanos=32000000)
    parse_duration("0.1 days")    # Duration(seconds=8640, nanos=0)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Iterator

from durspan.duration import ZERO, Duration
from durspan.errors import EmptyInput, MalformedSpan, ParseFailed, SpanErrorKind
from durspan.suffixes import resolve_suffix
from durspan.units import MAX_SECONDS, NANOS_PER_SECOND, Unit

_NUMBER_RE = re.compile(r"(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_BLANKS_RE = re.compile(r"[ \t]*")
_SEPARATOR_RE = re.compile(r"[ \t]*and[ \t]*|[ \t]+")
_MAX_LITERAL = float(MAX_SECONDS)


@dataclass(frozen=True)
class Span:
    literal: str
    value: float
    unit: Unit
    start: int
    end: int
    duration: Duration


def _round_half_away(x: float) -> int:
    # x is never negative here.
    whole = math.floor(x)
    return whole + 1 if x - whole >= 0.5 else whole


def span_to_duration(value: float, unit: Unit) -> Duration:
    """Convert ``value`` of ``unit`` into an exact seconds/nanoseconds pair.

    Raises OverflowError when the whole seconds do not fit in 64 bits.
    """
    total = unit.to_seconds(value)
    whole = math.floor(total)
    nanos = _round_half_away((total - whole) * 1e9)
    seconds = int(whole)
    if nanos >= NANOS_PER_SECOND:
        seconds += 1
        nanos -= NANOS_PER_SECOND
    if seconds > MAX_SECONDS:
        raise OverflowError(f"{value} {unit.name.lower()}s overflows the seconds range")
    return Duration(seconds, nanos)


def _read_span(text: str, pos: int) -> Span:
    number = _NUMBER_RE.match(text, pos)
    if number is None:
        raise MalformedSpan(pos, text[pos:], SpanErrorKind.NUMBER)
    literal = number.group(0)
    value = float(literal)
    if not 0.0 <= value <= _MAX_LITERAL:
        raise MalformedSpan(pos, text[pos:], SpanErrorKind.RANGE, literal)

    unit_pos = _BLANKS_RE.match(text, number.end()).end()
    resolved = resolve_suffix(text, unit_pos)
    if resolved is None:
        raise MalformedSpan(unit_pos, text[unit_pos:], SpanErrorKind.UNIT, literal)
    unit, end = resolved

    try:
        duration = span_to_duration(value, unit)
    except OverflowError as exc:
        raise MalformedSpan(pos, text[pos:], SpanErrorKind.RANGE, literal) from exc
    return Span(literal, value, unit, pos, end, duration)


def _scan(text: str) -> Iterator[Span]:
    pos = 0
    first = True
    while pos < len(text):
        try:
            span = _read_span(text, pos)
        except MalformedSpan as exc:
            # Once one span has been read, a span that fails to tokenize just
            # ends the scan; out-of-range numbers are always fatal.
            if first or exc.kind is SpanErrorKind.RANGE:
                raise
            break
        yield span
        first = False
        sep = _SEPARATOR_RE.match(text, span.end)
        pos = sep.end() if sep else span.end

    leftover = text[pos:].strip()
    if leftover:
        raise ParseFailed(leftover)


def iter_spans(text: str) -> Iterator[Span]:
    """Lazily yield each span of ``text`` in input order.

    Positions are indices into the whitespace-stripped input.  Errors are
    raised at the point of failure, exactly as :func:`parse_duration` does.
    """
    text = text.strip()
    if not text:
        raise EmptyInput()
    if text == "0":
        return iter(())
    return _scan(text)


def parse_duration(text: str) -> Duration:
    """Parse human-friendly duration text such as ``"1hour 12min 5s"``.

    Supported suffixes:

    * ``nanos``, ``nsec``, ``ns``: nanoseconds
    * ``micros``, ``usec``, ``us``: microseconds
    * ``millis``, ``msec``, ``ms``: milliseconds
    * ``seconds``, ``second``, ``secs``, ``sec``, ``s``
    * ``minutes``, ``minute``, ``mins``, ``min``, ``m``
    * ``hours``, ``hour``, ``hrs``, ``hr``, ``h``, ``H``
    * ``days``, ``day``, ``dys``, ``dy``, ``d``, ``D``
    * ``weeks``, ``week``, ``wks``, ``wk``, ``w``, ``W``
    * ``months``, ``month``, ``mths``, ``mth``, ``M``: 30.44 days
    * ``years``, ``year``, ``yrs``, ``yr``, ``y``, ``Y``: 365.25 days

    Raises:
        EmptyInput: the stripped text is empty.
        MalformedSpan: the first span is invalid, or any number is out of range.
        ParseFailed: text remains after the last valid span.
    """
    stripped = text.strip()
    total = ZERO
    for span in iter_spans(stripped):
        try:
            total = total + span.duration
        except OverflowError as exc:
            raise MalformedSpan(
                span.start, stripped[span.start:], SpanErrorKind.RANGE, span.literal
            ) from exc
    return total
