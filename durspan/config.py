"""
Configuration constants and environment parsing for durspan.

All DURSPAN_* environment variables are parsed here and exported as
module-level constants. Other modules import from this module rather than
reading os.environ directly.
"""
from __future__ import annotations

import os
from typing import Optional, Union

from durspan.duration import Duration
from durspan.errors import DurationError
from durspan.grammar import parse_duration
from durspan.util.logging import get_logger

logger = get_logger(__name__)


def _bool_env(name: str, default: bool = False) -> bool:
    """Parse a boolean flag from environment, returning default when unset."""
    val = os.getenv(name)
    if val is None or not val.strip():
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


def duration_env(name: str, default: Union[Duration, str, None] = None) -> Optional[Duration]:
    """
    Read a duration such as "30s" or "1h and 30m" from an environment variable.

    Args:
        name: Environment variable name.
        default: Returned (parsed, if given as text) when the variable is unset
            or blank.

    Returns:
        The parsed Duration, or None when neither the variable nor a default is set.

    Raises:
        DurationError: The variable holds text that is not a valid duration.
            Invalid values are never replaced by the default.
    """
    val = os.getenv(name)
    if val is None or not val.strip():
        if isinstance(default, str):
            return parse_duration(default)
        return default
    try:
        return parse_duration(val)
    except DurationError as exc:
        logger.error("Invalid duration in %s=%r: %s", name, val, exc, extra={"env_var": name})
        raise


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
DEBUG: bool = _bool_env("DURSPAN_DEBUG")
"""Force DEBUG logging for the command line."""

LOG_LEVEL: str = "DEBUG" if DEBUG else os.getenv("DURSPAN_LOG_LEVEL", "WARNING").upper()
"""Default log level for the command line."""

LOG_JSON_FILE: Optional[str] = os.getenv("DURSPAN_LOG_JSON") or None
"""Optional path receiving JSON-lines logs from the command line."""


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
OUTPUT_JSON: bool = _bool_env("DURSPAN_JSON")
"""Emit JSON from `durspan parse` unless --plain is given."""
