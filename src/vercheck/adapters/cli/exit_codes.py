"""POSIX-conventional exit codes for CLI error paths.

Provides a single :class:`ExitCode` enum so every ``SystemExit`` raised by a
CLI command carries a meaningful, grep-friendly integer instead of a bare ``1``.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    Values follow sysexits.h and errno conventions where applicable:

    * 0: versions agree
    * 1: versions disagree
    * 2, 13: descriptor missing (ENOENT) or not readable (EACCES)
    * 22: EINVAL, bad CLI argument
    * 65: EX_DATAERR, descriptor declares no version
    * 78: EX_CONFIG, inputs not configured or unresolvable

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.VERSION_NOT_FOUND)
        65
    """

    SUCCESS = 0
    VERSION_MISMATCH = 1
    FILE_NOT_FOUND = 2
    PERMISSION_DENIED = 13
    INVALID_ARGUMENT = 22
    VERSION_NOT_FOUND = 65
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
