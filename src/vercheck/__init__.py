"""Public package surface exposing the version check, metadata, and configuration.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: version declaration matching and error types
- Composition exports: the wired consistency check and configuration
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Composition exports (wired adapters)
from .composition import check_version, get_config

# Domain exports
from .domain.behaviors import CheckResult, find_version_declaration
from .domain.errors import (
    CheckError,
    ConfigurationError,
    DescriptorUnreadableError,
    VersionMismatchError,
    VersionNotFoundError,
)

# Test helper
from .testing import assert_version_consistent

__all__ = [
    "CheckError",
    "CheckResult",
    "ConfigurationError",
    "DescriptorUnreadableError",
    "VersionMismatchError",
    "VersionNotFoundError",
    "assert_version_consistent",
    "check_version",
    "find_version_declaration",
    "get_config",
    "print_info",
]
