"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Version declaration matching and comparison
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    VERSION_LINE_PATTERN,
    CheckResult,
    VersionDeclaration,
    compare_versions,
    find_version_declaration,
    match_version_line,
)
from .enums import OutputFormat
from .errors import (
    CheckError,
    ConfigurationError,
    DescriptorUnreadableError,
    VersionMismatchError,
    VersionNotFoundError,
)

__all__ = [
    # Behaviors
    "VERSION_LINE_PATTERN",
    "CheckResult",
    "VersionDeclaration",
    "compare_versions",
    "find_version_declaration",
    "match_version_line",
    # Enums
    "OutputFormat",
    # Errors
    "CheckError",
    "ConfigurationError",
    "DescriptorUnreadableError",
    "VersionMismatchError",
    "VersionNotFoundError",
]
