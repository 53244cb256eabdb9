"""Exit codes for CLI error paths.

Every ``SystemExit`` raised by a command carries one of these values so
scripts calling ``cocoonmail`` can tell configuration problems, bad input
and API outages apart.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    * 0-1: generic success / failure
    * 2, 13: errno-derived codes (ENOENT, EACCES)
    * 22: EINVAL, rejected address or option value
    * 69: EX_UNAVAILABLE, the API could not be reached
    * 78: EX_CONFIG, missing API key or invalid settings

    Example:
        >>> int(ExitCode.DELIVERY_FAILURE)
        69
        >>> ExitCode(78).name
        'CONFIG_ERROR'
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    DELIVERY_FAILURE = 69
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
