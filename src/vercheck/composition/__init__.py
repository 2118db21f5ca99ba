"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config

# Configuration services
from ..adapters.config.loader import get_config, get_default_config_path

# Logging services
from ..adapters.logging import init_logging

# Descriptor and expected-version sources
from ..adapters.sources.descriptor import read_descriptor_lines, resolve_descriptor_path
from ..adapters.sources.expected import resolve_expected_version
from ..application.checker import run_check

# Static conformance assertions: pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.descriptor import DescriptorStub
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        ReadDescriptorLines,
        ResolveDescriptorPath,
        ResolveExpectedVersion,
    )
    from ..domain.behaviors import CheckResult

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_read_descriptor_lines: ReadDescriptorLines = read_descriptor_lines
    _assert_resolve_descriptor_path: ResolveDescriptorPath = resolve_descriptor_path
    _assert_resolve_expected_version: ResolveExpectedVersion = resolve_expected_version


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    read_descriptor_lines: ReadDescriptorLines
    resolve_descriptor_path: ResolveDescriptorPath
    resolve_expected_version: ResolveExpectedVersion

    def check_version(self, descriptor: Path, expected: str) -> CheckResult:
        """Run the consistency check through this container's descriptor reader."""
        return run_check(descriptor, expected, read_lines=self.read_descriptor_lines)


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        read_descriptor_lines=read_descriptor_lines,
        resolve_descriptor_path=resolve_descriptor_path,
        resolve_expected_version=resolve_expected_version,
    )


def build_testing(*, stub: DescriptorStub | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        stub: Optional DescriptorStub serving descriptor contents. When None,
            an empty stub is created, so every descriptor reads as missing.
            Pass your own stub to preload files and assert on reads.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        DescriptorStub,
        display_config_in_memory,
        get_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
    )

    descriptor_stub = stub if stub is not None else DescriptorStub()

    return AppServices(
        get_config=get_config_in_memory,
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        read_descriptor_lines=descriptor_stub.read_descriptor_lines,
        resolve_descriptor_path=resolve_descriptor_path,
        resolve_expected_version=resolve_expected_version,
    )


def check_version(descriptor: Path, expected: str) -> CheckResult:
    """Check that the descriptor file on disk declares exactly ``expected``.

    Raises:
        DescriptorUnreadableError: If the file cannot be read.
        VersionNotFoundError: If no line declares a version.
        VersionMismatchError: If the declared version differs.
    """
    return run_check(descriptor, expected, read_lines=read_descriptor_lines)


__all__ = [
    # Configuration
    "get_config",
    "get_default_config_path",
    "display_config",
    # Logging
    "init_logging",
    # Check
    "check_version",
    "read_descriptor_lines",
    "resolve_descriptor_path",
    "resolve_expected_version",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
