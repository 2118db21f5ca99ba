"""Input adapters - reading the descriptor and resolving the expected version.

Contents:
    * :mod:`.descriptor` - Descriptor path resolution and file reading
    * :mod:`.expected` - Expected version from a literal or a module attribute
"""

from __future__ import annotations

from .descriptor import read_descriptor_lines, resolve_descriptor_path
from .expected import parse_attribute_reference, resolve_expected_version

__all__ = [
    "parse_attribute_reference",
    "read_descriptor_lines",
    "resolve_descriptor_path",
    "resolve_expected_version",
]
