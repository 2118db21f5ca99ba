"""Validated ``[version_check]`` configuration section.

Provides the VersionCheckConfig Pydantic model and the loader that builds it
from a configuration dictionary. CLI options take precedence over these
values; see :meth:`VersionCheckConfig.merged`.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from vercheck import __init__conf__
from vercheck.domain.errors import ConfigurationError

_SECTION = "version_check"


class VersionCheckConfig(BaseModel):
    """Inputs of the version check as read from the layered configuration.

    Example:
        >>> cfg = VersionCheckConfig(descriptor="build.gradle.kts", expected="0.6.9")
        >>> cfg.descriptor
        'build.gradle.kts'
        >>> VersionCheckConfig(expected="").expected is None
        True
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    descriptor: str | None = None
    anchor: str | None = None
    expected: str | None = None
    expected_from: str | None = None

    @field_validator("descriptor", "anchor", "expected", "expected_from", mode="before")
    @classmethod
    def _coerce_empty_string_to_none(cls, v: Any) -> Any:
        """Treat empty or whitespace-only strings as "not configured".

        Examples:
            >>> VersionCheckConfig._coerce_empty_string_to_none("  ")
            >>> VersionCheckConfig._coerce_empty_string_to_none("pyproject.toml")
            'pyproject.toml'
        """
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def merged(self, **cli_values: str | None) -> VersionCheckConfig:
        """Return a copy where every non-empty CLI value replaces the configured one.

        A CLI ``expected`` clears a configured ``expected_from`` and vice versa,
        so the command line always wins over the file.

        Example:
            >>> base = VersionCheckConfig(descriptor="a.kts", expected_from="pkg:VERSION")
            >>> merged = base.merged(expected="1.2.3", descriptor=None)
            >>> (merged.descriptor, merged.expected, merged.expected_from)
            ('a.kts', '1.2.3', None)
        """
        updates = {key: value for key, value in cli_values.items() if value}
        if "expected" in updates:
            updates.setdefault("expected_from", None)
        if "expected_from" in updates:
            updates.setdefault("expected", None)
        return self.model_copy(update=updates)


def env_variable_name(key: str) -> str:
    """Return the environment variable lib_layered_config maps to ``[version_check] key``.

    Example:
        >>> env_variable_name("expected")
        'VERCHECK___VERSION_CHECK__EXPECTED'
    """
    prefix = __init__conf__.LAYEREDCONF_SLUG.replace("-", "_").upper()
    return f"{prefix}___{_SECTION.upper()}__{key.upper()}"


def _same_number(text: str, value: int | float) -> bool:
    try:
        return float(text) == float(value)
    except ValueError:
        return False


def _as_text(key: str, value: Any, environ: Mapping[str, str]) -> Any:
    """Undo number coercion of a version-like value.

    The environment layer parses ``1.10`` into the float ``1.1``; the text
    the user wrote is still in the environment and is returned instead. A
    number from any other layer cannot be recovered and is rejected.
    """
    if isinstance(value, bool) or not isinstance(value, int | float):
        return value
    raw = environ.get(env_variable_name(key))
    if raw is not None and _same_number(raw, value):
        return raw.strip()
    raise ConfigurationError(
        f"[{_SECTION}] {key} was read as the number {value!r}; quote the value so it stays text "
        f'(write {key} = "1.10", not {key} = 1.10)'
    )


def load_version_check_config(
    config_dict: Mapping[str, Any], environ: Mapping[str, str] | None = None
) -> VersionCheckConfig:
    """Build VersionCheckConfig from the ``[version_check]`` section contents.

    Args:
        config_dict: The merged section.
        environ: Environment to recover unparsed values from; defaults to ``os.environ``.

    Raises:
        ConfigurationError: If the section holds unknown keys, unquoted
            numbers or other non-string values.

    Example:
        >>> load_version_check_config({"descriptor": "pyproject.toml"}).descriptor
        'pyproject.toml'
        >>> load_version_check_config({"expected": 1.1}, {"VERCHECK___VERSION_CHECK__EXPECTED": "1.10"}).expected
        '1.10'
    """
    env = os.environ if environ is None else environ
    values = {key: _as_text(key, value, env) for key, value in config_dict.items()}
    try:
        return VersionCheckConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{_SECTION}] configuration: {exc}") from exc


__all__ = [
    "VersionCheckConfig",
    "env_variable_name",
    "load_version_check_config",
]
