"""Exception types raised by the duration grammar."""

from __future__ import annotations

import re
from enum import Enum

_SUPPORTED_UNITS = "ns, us, ms, sec, min, hours, days, weeks, months, years (and few variations)"
_WORD_RE = re.compile(r"[^0-9.\s]+")


class SpanErrorKind(Enum):
    NUMBER = "number"
    UNIT = "unit"
    RANGE = "range"


class DurationError(ValueError):
    """Base class for every duration parsing failure."""


class EmptyInput(DurationError):
    def __init__(self) -> None:
        super().__init__("input is empty")


class ParseFailed(DurationError):
    """Some spans parsed, but text was left over after the last one."""

    def __init__(self, leftover: str) -> None:
        self.leftover = leftover
        super().__init__(f"parsing duration failed at: {leftover}")


class MalformedSpan(DurationError):
    """No span could be read at ``position``.

    Attributes:
        position: Index into the stripped input where the failing rule started.
        fragment: Input text from ``position`` to the end.
        kind: Which rule failed (numeric literal, unit suffix, or range check).
        literal: The numeric literal of the span, when one was read.
    """

    def __init__(self, position: int, fragment: str, kind: SpanErrorKind, literal: str = "") -> None:
        self.position = position
        self.fragment = fragment
        self.kind = kind
        self.literal = literal
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.kind is SpanErrorKind.NUMBER:
            return f"expected number at {self.position}"
        if self.kind is SpanErrorKind.RANGE:
            return f"number is too large to fit a duration: {self.literal or self.fragment}"
        word = _WORD_RE.match(self.fragment)
        if word is None:
            example = self.literal or "1"
            return f"time unit needed, for example {example}sec or {example}ms"
        return f'unknown time unit "{word.group(0)}", supported units: {_SUPPORTED_UNITS}'
