"""Parse and apply ``--set SECTION.KEY=VALUE`` CLI overrides to Config.

Values are coerced with ``orjson`` so booleans, signed numbers and arrays arrive
typed. Strings made only of digits and dots, such as ``1``, ``1.10`` or ``0.6.9``,
are version tokens in this application and always stay strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Union of types that :func:`coerce_value` can produce."""

_VERSION_TOKEN: Final[re.Pattern[str]] = re.compile(r"^[0-9.]+$")


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """A single parsed configuration override."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Split a ``SECTION.KEY[.SUBKEY...]=VALUE`` string into a ConfigOverride.

    The first ``=`` separates the dotted path from the value; the first dot
    of the path separates the section from the key path.

    Args:
        raw: Raw override string (e.g., ``version_check.expected=0.6.9``).

    Returns:
        Parsed ConfigOverride.

    Raises:
        ValueError: If ``=`` or the section dot is missing, or a path
            component is empty.

    Examples:
        >>> override = parse_override("version_check.expected=0.6.9")
        >>> override.section, override.key_path, override.value
        ('version_check', ('expected',), '0.6.9')

        >>> parse_override("lib_log_rich.queue_enabled=false").value
        False
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)

    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")

    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Coerce a raw CLI value, keeping version tokens and non-JSON text as strings.

    Examples:
        >>> coerce_value("true")
        True
        >>> coerce_value("-3")
        -3
        >>> coerce_value("1")
        '1'
        >>> coerce_value("1.10")
        '1.10'
        >>> coerce_value("0.6.9")
        '0.6.9'
        >>> coerce_value('["a","b"]')
        ['a', 'b']
        >>> coerce_value("build.gradle.kts")
        'build.gradle.kts'
        >>> coerce_value("")
        ''
    """
    if raw == "" or _VERSION_TOKEN.match(raw):
        return raw
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Insert ``override`` into a nested dict, creating intermediate levels.

    Raises:
        TypeError: If an intermediate key already holds a non-dict value.

    Examples:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="version_check", key_path=("anchor",), value="/srv"))
        >>> d["version_check"]["anchor"]
        '/srv'
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge CLI overrides into a Config instance.

    Args:
        config: Immutable Config loaded from file/env layers.
        raw_overrides: ``SECTION.KEY=VALUE`` strings from ``--set``.

    Returns:
        New Config with overrides applied, or ``config`` itself when there are none.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> from lib_layered_config import Config
        >>> cfg = Config({"version_check": {"expected": "0.1.0"}}, {})
        >>> apply_overrides(cfg, ("version_check.expected=0.2.0",))["version_check"]["expected"]
        '0.2.0'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))

    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
