"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from pathlib import Path


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the descriptor path or the expected version cannot be
    determined from CLI options, configuration layers, or the referenced
    module. Caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> from vercheck.domain.errors import ConfigurationError
        >>> err = ConfigurationError("No expected version configured")
        >>> str(err)
        'No expected version configured'
    """


class CheckError(Exception):
    """Base class for every failure of a version consistency check.

    Each subclass records the descriptor path so that boundary code can
    report which file was inspected without re-deriving it.
    """

    def __init__(self, message: str, *, descriptor: Path) -> None:
        super().__init__(message)
        self.descriptor = descriptor


class DescriptorUnreadableError(CheckError):
    """The descriptor file is missing, unreadable, or failed mid-read.

    The original ``OSError`` is chained as ``__cause__``.

    Example:
        >>> from pathlib import Path
        >>> err = DescriptorUnreadableError("Cannot read build.gradle.kts", descriptor=Path("build.gradle.kts"))
        >>> err.descriptor.name
        'build.gradle.kts'
    """


class VersionNotFoundError(CheckError):
    """The descriptor was read but declares no version.

    Example:
        >>> from pathlib import Path
        >>> err = VersionNotFoundError.for_descriptor(Path("build.gradle.kts"))
        >>> str(err)
        'Failed to find SDK version in build.gradle.kts'
    """

    @classmethod
    def for_descriptor(cls, descriptor: Path) -> VersionNotFoundError:
        return cls(f"Failed to find SDK version in {descriptor}", descriptor=descriptor)


class VersionMismatchError(CheckError):
    """Declared and expected versions were both resolved but differ.

    Attributes:
        declared: Version string found in the descriptor.
        expected: Version string reported by the program under test.

    Example:
        >>> from pathlib import Path
        >>> err = VersionMismatchError(declared="0.6.9", expected="0.6.8", descriptor=Path("build.gradle.kts"))
        >>> str(err)
        'Version mismatch: build.gradle.kts declares "0.6.9" but expected "0.6.8"'
    """

    def __init__(self, *, declared: str, expected: str, descriptor: Path) -> None:
        super().__init__(
            f'Version mismatch: {descriptor} declares "{declared}" but expected "{expected}"',
            descriptor=descriptor,
        )
        self.declared = declared
        self.expected = expected


__all__ = [
    "CheckError",
    "ConfigurationError",
    "DescriptorUnreadableError",
    "VersionMismatchError",
    "VersionNotFoundError",
]
