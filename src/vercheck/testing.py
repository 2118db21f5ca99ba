"""Assertion helper for running the version check inside a test suite.

Example:
    A project whose client exposes ``SDK_VERSION`` in ``client/session.py``
    keeps its build descriptor and its constant in lockstep with::

        from vercheck.testing import assert_version_consistent

        def test_sdk_version_matches_build() -> None:
            assert_version_consistent("pyproject.toml", expected_from="client.session:SDK_VERSION")
"""

from __future__ import annotations

from pathlib import Path

from .adapters.sources.descriptor import read_descriptor_lines, resolve_descriptor_path
from .adapters.sources.expected import resolve_expected_version
from .application.checker import run_check
from .domain.behaviors import CheckResult
from .domain.errors import VersionMismatchError, VersionNotFoundError


def assert_version_consistent(
    descriptor: str | Path,
    expected: str | None = None,
    *,
    expected_from: str | None = None,
    anchor: str | Path | None = None,
) -> CheckResult:
    """Assert that ``descriptor`` declares the expected version.

    Missing declarations and mismatches fail as ``AssertionError`` so test
    runners report them as test failures. An unreadable descriptor or an
    unresolvable expected version propagates unchanged, since those are
    set-up errors rather than findings.

    Args:
        descriptor: Descriptor path, absolute or relative to ``anchor``.
        expected: Literal expected version.
        expected_from: ``package.module:ATTRIBUTE`` reference to the expected version.
        anchor: Directory relative descriptor paths resolve against and
            ``expected_from`` modules are imported from (default: current
            working directory).

    Returns:
        The CheckResult of the successful check.

    Raises:
        AssertionError: If no version is declared or the versions differ.
        DescriptorUnreadableError: If the descriptor cannot be read.
        ConfigurationError: If the expected version cannot be determined.
    """
    path = resolve_descriptor_path(descriptor, anchor)
    wanted = resolve_expected_version(expected, expected_from, anchor)
    try:
        return run_check(path, wanted, read_lines=read_descriptor_lines)
    except (VersionNotFoundError, VersionMismatchError) as exc:
        raise AssertionError(str(exc)) from exc


__all__ = ["assert_version_consistent"]
