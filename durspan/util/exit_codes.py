"""Documented exit codes for the durspan command line.

Exit codes follow UNIX conventions:
- 0: Success
- 1: General/unspecified error
- 2: Invalid command-line arguments or usage
- 3-4: Duration-specific errors

Usage:
    from durspan.util.exit_codes import ExitCode
    sys.exit(ExitCode.INVALID_DURATION)
"""

from __future__ import annotations


class ExitCode:
    """Exit code constants for durspan processes.

    Attributes:
        SUCCESS: Normal termination, no errors.
        GENERAL_ERROR: Unspecified runtime error.
        INVALID_ARGS: Command-line argument validation failed.
        INVALID_DURATION: Duration text was empty or could not be parsed.
        OUT_OF_RANGE: A duration does not fit in 64-bit seconds.
    """

    SUCCESS: int = 0
    GENERAL_ERROR: int = 1
    INVALID_ARGS: int = 2
    INVALID_DURATION: int = 3
    OUT_OF_RANGE: int = 4

    @classmethod
    def message(cls, code: int) -> str:
        """Return a human-readable message for an exit code."""
        messages = {
            cls.SUCCESS: "Success",
            cls.GENERAL_ERROR: "General error",
            cls.INVALID_ARGS: "Invalid arguments",
            cls.INVALID_DURATION: "Invalid duration",
            cls.OUT_OF_RANGE: "Duration out of range",
        }
        return messages.get(code, f"Unknown exit code {code}")
