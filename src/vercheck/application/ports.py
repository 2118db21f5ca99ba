"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``)
    are imported under ``TYPE_CHECKING`` only so that import-linter layer
    contracts remain satisfied at runtime.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the path to the bundled default configuration file."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class ReadDescriptorLines(Protocol):
    """Return every line of a descriptor file, raising DescriptorUnreadableError on failure."""

    def __call__(self, path: Path) -> list[str]: ...


class ResolveDescriptorPath(Protocol):
    """Resolve a possibly relative descriptor path against an anchor directory."""

    def __call__(self, descriptor: str | Path, anchor: str | Path | None = ...) -> Path: ...


class ResolveExpectedVersion(Protocol):
    """Return the expected version from a literal or a ``module:ATTRIBUTE`` reference."""

    def __call__(
        self,
        expected: str | None = ...,
        expected_from: str | None = ...,
        search_root: str | Path | None = ...,
    ) -> str: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "ReadDescriptorLines",
    "ResolveDescriptorPath",
    "ResolveExpectedVersion",
]
