"""Version consistency check use case.

Orchestrates the descriptor read (through an injected port) and the pure
domain matching and comparison. Holds no state between invocations, so
repeated runs against unchanged inputs return equal results.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..domain.behaviors import CheckResult, compare_versions, find_version_declaration
from .ports import ReadDescriptorLines

logger = logging.getLogger(__name__)


def run_check(descriptor: Path, expected: str, *, read_lines: ReadDescriptorLines) -> CheckResult:
    """Check that ``descriptor`` declares exactly ``expected``.

    The descriptor is read once; if reading fails no pattern matching is
    attempted. Lines are scanned in file order and the first version
    declaration is authoritative.

    Args:
        descriptor: Path of the build descriptor.
        expected: Version constant reported by the program under test.
        read_lines: Port returning the descriptor's lines.

    Returns:
        CheckResult for the matching declaration.

    Raises:
        DescriptorUnreadableError: Propagated from ``read_lines``.
        VersionNotFoundError: If no line declares a version.
        VersionMismatchError: If the declared version differs from ``expected``.

    Example:
        >>> run_check(Path("build.gradle.kts"), "0.1.4", read_lines=lambda _p: ['    version = "0.1.4"']).line_number
        1
    """
    lines = read_lines(descriptor)
    declaration = find_version_declaration(lines)
    if declaration is not None:
        logger.debug("Found version %s at %s:%d", declaration.version, descriptor, declaration.line_number)
    return compare_versions(declaration, expected, descriptor=descriptor)


__all__ = ["run_check"]
