"""lib_log_rich wiring for vercheck; composition imports from here."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
