"""In-memory descriptor adapter for testing.

Contents:
    * :class:`DescriptorStub` - Serves descriptor text from memory and records reads.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ...domain.errors import DescriptorUnreadableError


def _empty_path_list() -> list[Path]:
    return []


@dataclass
class DescriptorStub:
    """Serve descriptor contents from memory and record every read.

    Paths not present in ``files`` behave like missing files.

    Attributes:
        files: Mapping of path to descriptor text.
        reads: Paths passed to :meth:`read_descriptor_lines`, in call order.

    Example:
        >>> stub = DescriptorStub(files={Path("build.gradle.kts"): '    version = "0.1.4"\\n'})
        >>> stub.read_descriptor_lines(Path("build.gradle.kts"))
        ['    version = "0.1.4"']
        >>> len(stub.reads)
        1
    """

    files: dict[Path, str] = field(default_factory=dict)
    reads: list[Path] = field(default_factory=_empty_path_list)

    def read_descriptor_lines(self, path: Path) -> list[str]:
        """Return the stored lines or raise DescriptorUnreadableError."""
        self.reads.append(path)
        try:
            text = self.files[path]
        except KeyError as exc:
            raise DescriptorUnreadableError(f"Descriptor not found: {path}", descriptor=path) from exc
        return text.splitlines()


__all__ = ["DescriptorStub"]
