"""Pure domain functions with no I/O or framework dependencies.

Contents:
    * :data:`VERSION_LINE_PATTERN` - Regex matching a version declaration line.
    * :class:`VersionDeclaration` - Declared version and its 1-based line number.
    * :class:`CheckResult` - Outcome of a successful consistency check.
    * :func:`find_version_declaration` - First declaration in a line sequence.
    * :func:`compare_versions` - Exact equality check raising on mismatch.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .errors import VersionMismatchError, VersionNotFoundError

#: Optional indentation, ``version = "<digits and dots>"``, optional trailing blanks.
VERSION_LINE_PATTERN: Final[re.Pattern[str]] = re.compile(r'^\s*version\s*=\s*"(?P<version>[0-9.]+)"\s*$')


@dataclass(frozen=True, slots=True)
class VersionDeclaration:
    """A version token extracted from a descriptor line."""

    version: str
    line_number: int


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Successful check outcome.

    Example:
        >>> result = CheckResult(descriptor=Path("build.gradle.kts"), declared="0.6.9", expected="0.6.9", line_number=52)
        >>> result.as_dict()["declared"]
        '0.6.9'
    """

    descriptor: Path
    declared: str
    expected: str
    line_number: int

    def as_dict(self) -> dict[str, str | int]:
        return {
            "descriptor": str(self.descriptor),
            "declared": self.declared,
            "expected": self.expected,
            "line_number": self.line_number,
        }


def match_version_line(line: str) -> str | None:
    """Return the quoted version of a declaration line, or None.

    Example:
        >>> match_version_line('  version = "0.6.9"')
        '0.6.9'
        >>> match_version_line('version="1.2"  ')
        '1.2'
        >>> match_version_line('  version = "1.0.0-beta"') is None
        True
        >>> match_version_line('  minSdkVersion = "21"') is None
        True
    """
    matched = VERSION_LINE_PATTERN.match(line.rstrip("\r\n"))
    if matched is None:
        return None
    return matched.group("version")


def find_version_declaration(lines: Iterable[str]) -> VersionDeclaration | None:
    """Scan lines in order and return the first version declaration.

    Scanning stops at the first match; later declarations are never looked at.

    Example:
        >>> find_version_declaration(["plugins {", '    version = "0.1.4"', '    version = "9.9.9"'])
        VersionDeclaration(version='0.1.4', line_number=2)
        >>> find_version_declaration(["no declaration here"]) is None
        True
    """
    for line_number, line in enumerate(lines, start=1):
        version = match_version_line(line)
        if version is not None:
            return VersionDeclaration(version=version, line_number=line_number)
    return None


def compare_versions(declaration: VersionDeclaration | None, expected: str, *, descriptor: Path) -> CheckResult:
    """Compare a declared version to the expected one by exact string equality.

    No numeric parsing, no normalisation: ``"1.0"`` and ``"1.0.0"`` differ.

    Args:
        declaration: Result of :func:`find_version_declaration`.
        expected: Version constant reported by the program under test.
        descriptor: Descriptor path, used for reporting only.

    Returns:
        CheckResult describing the matching declaration.

    Raises:
        VersionNotFoundError: If ``declaration`` is None.
        VersionMismatchError: If declared and expected differ.

    Example:
        >>> decl = VersionDeclaration(version="0.6.9", line_number=3)
        >>> compare_versions(decl, "0.6.9", descriptor=Path("build.gradle.kts")).declared
        '0.6.9'
        >>> compare_versions(decl, "0.6.8", descriptor=Path("build.gradle.kts"))  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        VersionMismatchError: Version mismatch
    """
    if declaration is None:
        raise VersionNotFoundError.for_descriptor(descriptor)
    if declaration.version != expected:
        raise VersionMismatchError(declared=declaration.version, expected=expected, descriptor=descriptor)
    return CheckResult(
        descriptor=descriptor,
        declared=declaration.version,
        expected=expected,
        line_number=declaration.line_number,
    )


__all__ = [
    "VERSION_LINE_PATTERN",
    "CheckResult",
    "VersionDeclaration",
    "compare_versions",
    "find_version_declaration",
    "match_version_line",
]
