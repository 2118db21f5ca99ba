"""Configuration adapter - loading, validation, display, and overrides.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.model` - ``[version_check]`` section validation
    * :mod:`.display` - Configuration and check-outcome rendering
    * :mod:`.overrides` - CLI ``--set`` override parsing and application
"""

from __future__ import annotations

from .display import display_config, format_check_failure, format_check_result
from .loader import get_config, get_default_config_path
from .model import VersionCheckConfig, load_version_check_config
from .overrides import apply_overrides

__all__ = [
    "VersionCheckConfig",
    "apply_overrides",
    "display_config",
    "format_check_failure",
    "format_check_result",
    "get_config",
    "get_default_config_path",
    "load_version_check_config",
]
