"""Expected-version adapter: literal value or ``module:ATTRIBUTE`` reference.

The program under test owns its version constant (for example a
``SDK_VERSION`` attribute on its session module). This adapter imports the
module and reads the attribute so the check compares against the value the
program actually ships. The module is looked up in the project directory
first, so the project does not have to be installed next to vercheck.
"""

from __future__ import annotations

import importlib
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path

from vercheck.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)


def parse_attribute_reference(reference: str) -> tuple[str, str]:
    """Split ``package.module:ATTRIBUTE`` into its module and attribute parts.

    Args:
        reference: Attribute reference string.

    Returns:
        Tuple of (module path, dotted attribute path).

    Raises:
        ConfigurationError: If either part is missing.

    Examples:
        >>> parse_attribute_reference("client.session:SDK_VERSION")
        ('client.session', 'SDK_VERSION')
        >>> parse_attribute_reference("client:Session.VERSION")
        ('client', 'Session.VERSION')
        >>> parse_attribute_reference("client.session")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: Invalid version reference
    """
    module_name, sep, attribute = reference.strip().partition(":")
    if not sep or not module_name or not attribute:
        raise ConfigurationError(f"Invalid version reference {reference!r}: expected 'package.module:ATTRIBUTE'")
    return module_name, attribute


@contextmanager
def _importable_from(search_root: str | Path | None) -> Iterator[Path]:
    """Put ``search_root`` (default: the working directory) first on ``sys.path``."""
    root = Path(search_root).expanduser() if search_root else Path.cwd()
    entry = str(root)
    sys.path.insert(0, entry)
    importlib.invalidate_caches()
    try:
        yield root
    finally:
        with suppress(ValueError):
            sys.path.remove(entry)


def _load_attribute(reference: str, search_root: str | Path | None = None) -> object:
    module_name, attribute = parse_attribute_reference(reference)
    with _importable_from(search_root) as root:
        try:
            target: object = importlib.import_module(module_name)
        except ImportError as exc:
            raise ConfigurationError(
                f"Cannot import {module_name!r} for version reference {reference!r} from {root}: {exc}"
            ) from exc
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise ConfigurationError(f"Version reference {reference!r} not found: no attribute {part!r}") from exc
    return target


def resolve_expected_version(
    expected: str | None = None,
    expected_from: str | None = None,
    search_root: str | Path | None = None,
) -> str:
    """Return the expected version from exactly one of the two sources.

    Args:
        expected: Literal version string.
        expected_from: ``package.module:ATTRIBUTE`` reference to a string constant.
        search_root: Directory the referenced module is imported from, ahead
            of installed packages. Defaults to the working directory, so a
            project checked from its root finds its own modules uninstalled.

    Returns:
        The expected version string, unmodified.

    Raises:
        ConfigurationError: If both or neither source is given, the literal
            is empty, or the reference cannot be resolved to a string.

    Examples:
        >>> resolve_expected_version(expected="0.6.9")
        '0.6.9'
        >>> resolve_expected_version(expected_from="vercheck.__init__conf__:version") == __import__("vercheck").__init__conf__.version
        True
    """
    if expected is not None and expected_from is not None:
        raise ConfigurationError("Give either an expected version or a version reference, not both")
    if expected is not None:
        if not expected.strip():
            raise ConfigurationError("Expected version is empty")
        return expected
    if expected_from is None:
        raise ConfigurationError("No expected version configured (use --expected or --expected-from)")

    value = _load_attribute(expected_from, search_root)
    if not isinstance(value, str):
        raise ConfigurationError(f"Version reference {expected_from!r} is {type(value).__name__}, not str")
    logger.debug("Resolved expected version %s from %s", value, expected_from)
    return value


__all__ = [
    "parse_attribute_reference",
    "resolve_expected_version",
]
