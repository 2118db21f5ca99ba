"""Descriptor file adapter: path resolution and line reading."""

from __future__ import annotations

import logging
from pathlib import Path

from vercheck.domain.errors import ConfigurationError, DescriptorUnreadableError

logger = logging.getLogger(__name__)


def resolve_descriptor_path(descriptor: str | Path, anchor: str | Path | None = None) -> Path:
    """Resolve the descriptor path against an anchor directory.

    Absolute paths are returned unchanged. Relative paths are joined to
    ``anchor``, which defaults to the current working directory.

    Args:
        descriptor: Path to the build descriptor, absolute or relative.
        anchor: Directory a relative ``descriptor`` is resolved against.

    Returns:
        The resolved descriptor path (not checked for existence).

    Raises:
        ConfigurationError: If ``descriptor`` is empty.

    Example:
        >>> resolve_descriptor_path("build.gradle.kts", anchor="/work/client")
        PosixPath('/work/client/build.gradle.kts')
        >>> resolve_descriptor_path("/abs/pyproject.toml", anchor="/ignored")
        PosixPath('/abs/pyproject.toml')
    """
    if not str(descriptor).strip():
        raise ConfigurationError("No descriptor path configured")
    path = Path(descriptor).expanduser()
    if path.is_absolute():
        return path
    base = Path(anchor).expanduser() if anchor else Path.cwd()
    return base / path


def read_descriptor_lines(path: Path) -> list[str]:
    """Read all lines of the descriptor as UTF-8 text.

    The file handle is closed before returning, on success and on failure.

    Args:
        path: Descriptor file to read.

    Returns:
        Lines without trailing newlines.

    Raises:
        DescriptorUnreadableError: If the file is missing, not a regular file,
            unreadable, or not valid UTF-8.
    """
    logger.debug("Reading descriptor %s", path)
    try:
        with path.open(encoding="utf-8") as handle:
            return handle.read().splitlines()
    except FileNotFoundError as exc:
        raise DescriptorUnreadableError(f"Descriptor not found: {path}", descriptor=path) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DescriptorUnreadableError(f"Cannot read descriptor {path}: {exc}", descriptor=path) from exc


__all__ = [
    "read_descriptor_lines",
    "resolve_descriptor_path",
]
