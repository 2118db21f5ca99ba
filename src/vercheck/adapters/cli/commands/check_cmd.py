"""CLI command running the version consistency check.

Inputs are taken from the options below, falling back to the
``[version_check]`` configuration section (and therefore to ``--set`` and
``VERCHECK___VERSION_CHECK__*`` environment variables).

Contents:
    * :func:`cli_check` - Compare the descriptor's declared version to the expected one.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from vercheck.adapters.config.display import flush_logs, format_check_failure, format_check_result
from vercheck.adapters.config.model import VersionCheckConfig, load_version_check_config
from vercheck.domain.enums import OutputFormat
from vercheck.domain.errors import (
    CheckError,
    ConfigurationError,
    DescriptorUnreadableError,
    VersionNotFoundError,
)

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def exit_code_for(error: CheckError) -> ExitCode:
    """Map a check failure to its exit code.

    Example:
        >>> from pathlib import Path
        >>> exit_code_for(VersionNotFoundError.for_descriptor(Path("x")))
        <ExitCode.VERSION_NOT_FOUND: 65>
    """
    if isinstance(error, VersionNotFoundError):
        return ExitCode.VERSION_NOT_FOUND
    if isinstance(error, DescriptorUnreadableError) and isinstance(error.__cause__, PermissionError):
        return ExitCode.PERMISSION_DENIED
    if isinstance(error, DescriptorUnreadableError):
        return ExitCode.FILE_NOT_FOUND
    return ExitCode.VERSION_MISMATCH


def _settings(cli_ctx: CLIContext, **cli_values: str | None) -> VersionCheckConfig:
    section = cli_ctx.config.as_dict().get("version_check") or {}
    base = load_version_check_config(section)
    return base.merged(**cli_values)


@click.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--descriptor",
    type=str,
    default=None,
    help="Build descriptor declaring the version (default from config: pyproject.toml)",
)
@click.option(
    "--anchor",
    type=click.Path(file_okay=False),
    default=None,
    help="Project directory for relative descriptors and --expected-from imports (default: current directory)",
)
@click.option(
    "--expected",
    type=str,
    default=None,
    help="Version the program under test reports, e.g. 0.6.9",
)
@click.option(
    "--expected-from",
    type=str,
    default=None,
    metavar="MODULE:ATTRIBUTE",
    help="Read the expected version from an importable attribute, e.g. client.session:SDK_VERSION",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_check(
    ctx: click.Context,
    descriptor: str | None,
    anchor: str | None,
    expected: str | None,
    expected_from: str | None,
    output_format: str,
) -> None:
    r"""Check that the build descriptor declares the program's version.

    The first line of the form ``version = "X.Y.Z"`` is authoritative; the
    comparison is exact string equality.

    \b
    Exit codes:
    - 0:  versions agree
    - 1:  versions differ
    - 2:  descriptor not found (13: permission denied)
    - 65: descriptor declares no version
    - 78: descriptor or expected version not configured

    Example:
        >>> from click.testing import CliRunner
        >>> # Real invocation tested in test_cli_check_cmd.py
    """
    cli_ctx = get_cli_context(ctx)
    fmt = OutputFormat(output_format.lower())
    services = cli_ctx.services

    try:
        settings = _settings(
            cli_ctx, descriptor=descriptor, anchor=anchor, expected=expected, expected_from=expected_from
        )
        path = services.resolve_descriptor_path(settings.descriptor or "", settings.anchor)
        wanted = services.resolve_expected_version(settings.expected, settings.expected_from, settings.anchor)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc

    extra = {"command": "check", "descriptor": str(path), "expected": wanted, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-check", extra=extra):
        logger.info("Checking %s against expected version %s", path, wanted)
        try:
            result = services.check_version(path, wanted)
        except CheckError as exc:
            logger.warning("Version check failed: %s", exc)
            flush_logs()
            click.echo(format_check_failure(exc, fmt), err=fmt is OutputFormat.HUMAN)
            raise SystemExit(exit_code_for(exc)) from exc

        logger.info("Version %s confirmed at %s:%d", result.declared, path, result.line_number)
        flush_logs()
        click.echo(format_check_result(result, fmt))


__all__ = ["cli_check", "exit_code_for"]
