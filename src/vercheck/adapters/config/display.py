"""Rendering of configuration and check outcomes.

Configuration display delegates to lib_layered_config's Rich-styled
``display_config``. Check outcomes are formatted here as a single line for
humans or an ``orjson`` document for machines; the CLI echoes the text.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
from lib_layered_config import Config
from lib_layered_config import OutputFormat as LibOutputFormat
from lib_layered_config import display_config as _lib_display
from rich.console import Console

from vercheck.domain.behaviors import CheckResult
from vercheck.domain.enums import OutputFormat
from vercheck.domain.errors import (
    CheckError,
    DescriptorUnreadableError,
    VersionMismatchError,
    VersionNotFoundError,
)


def flush_logs() -> None:
    """Flush pending log output so it does not interleave with rendered text."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()


def display_config(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    console: Console | None = None,
    profile: str | None = None,
) -> None:
    """Display configuration using lib_layered_config's Rich display.

    Args:
        config: Already-loaded layered configuration object to display.
        output_format: HUMAN for TOML-like display, JSON for JSON.
        section: Optional section name (e.g. ``version_check``) to display alone.
        console: Optional Rich Console for output, mainly for tests.
        profile: Optional profile name to include in provenance comments.

    Raises:
        ValueError: If a section was requested that doesn't exist.
    """
    flush_logs()
    lib_format = LibOutputFormat(output_format.value)
    _lib_display(config, output_format=lib_format, section=section, profile=profile, console=console)


def failure_status(error: CheckError) -> str:
    """Return the machine-readable status keyword for a check failure.

    Example:
        >>> from pathlib import Path
        >>> failure_status(VersionNotFoundError.for_descriptor(Path("x")))
        'not_found'
    """
    if isinstance(error, VersionMismatchError):
        return "mismatch"
    if isinstance(error, VersionNotFoundError):
        return "not_found"
    if isinstance(error, DescriptorUnreadableError):
        return "unreadable"
    return "error"


def _dump(document: dict[str, object]) -> str:
    return orjson.dumps(document, option=orjson.OPT_INDENT_2).decode("utf-8")


def format_check_result(result: CheckResult, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Format a successful check.

    Example:
        >>> from pathlib import Path
        >>> result = CheckResult(descriptor=Path("build.gradle.kts"), declared="0.6.9", expected="0.6.9", line_number=52)
        >>> format_check_result(result)
        'OK: build.gradle.kts:52 declares version "0.6.9"'
    """
    if output_format is OutputFormat.JSON:
        return _dump({"status": "ok", **result.as_dict()})
    return f'OK: {result.descriptor}:{result.line_number} declares version "{result.declared}"'


def format_check_failure(error: CheckError, output_format: OutputFormat = OutputFormat.HUMAN) -> str:
    """Format a failed check; mismatches carry both version literals in JSON."""
    if output_format is OutputFormat.JSON:
        document: dict[str, object] = {
            "status": failure_status(error),
            "descriptor": str(error.descriptor),
            "message": str(error),
        }
        if isinstance(error, VersionMismatchError):
            document["declared"] = error.declared
            document["expected"] = error.expected
        return _dump(document)
    return f"FAILED: {error}"


__all__ = [
    "display_config",
    "failure_status",
    "flush_logs",
    "format_check_failure",
    "format_check_result",
]
