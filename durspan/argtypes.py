"""Duration parsing helpers for CLI arguments."""

from __future__ import annotations

import argparse
import math
from typing import Any, Optional

from durspan.duration import Duration
from durspan.errors import DurationError
from durspan.grammar import parse_duration


def duration_type(spec: Any) -> Duration:
    """argparse ``type=`` callable turning '90s', '2h 15m', ... into a Duration."""
    try:
        return parse_duration(str(spec))
    except DurationError as exc:
        raise argparse.ArgumentTypeError(f"Invalid duration '{spec}': {exc}") from exc


def seconds_type(spec: Optional[Any]) -> Optional[float]:
    """Parse strings like '30', '10m', '1.5 days', returning seconds as float.

    Plain numbers are taken as seconds.
    """
    if spec is None:
        return None
    if isinstance(spec, (int, float)):
        value = float(spec)
    else:
        text = str(spec).strip()
        try:
            value = float(text)
        except ValueError:
            return duration_type(text).total_seconds()
    if not math.isfinite(value) or value < 0:
        raise argparse.ArgumentTypeError(f"Invalid duration '{spec}'")
    return value
