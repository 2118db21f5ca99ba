"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.checker` - Version consistency check use case
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .checker import run_check
from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    ReadDescriptorLines,
    ResolveDescriptorPath,
    ResolveExpectedVersion,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "ReadDescriptorLines",
    "ResolveDescriptorPath",
    "ResolveExpectedVersion",
    "run_check",
]
