"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the application to external
systems and frameworks (CLI, configuration, descriptor files, logging).

Contents:
    * :mod:`.config` - Configuration loading, validation, and display
    * :mod:`.sources` - Descriptor reading and expected-version resolution
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
