"""Static package metadata surfaced to CLI commands and documentation.

Values here must stay in sync with ``pyproject.toml``; ``tests/test_metadata_sync.py``
fails when they drift.

Contents:
    * Distribution metadata (``name``, ``title``, ``version``, ``homepage``, ``author``).
    * ``shell_command`` - console script name.
    * ``LAYEREDCONF_*`` - identifiers used by lib_layered_config for config paths.
    * :func:`print_info` - human-readable metadata dump used by ``vercheck info``.
"""

from __future__ import annotations

name = "vercheck"
title = "Verify that a build descriptor and a program agree on their version"
version = "1.0.0"
homepage = "https://github.com/vercheck/vercheck"
author = "vercheck contributors"
author_email = "vercheck@users.noreply.github.com"
shell_command = "vercheck"

# lib_layered_config identifiers (Linux uses the slug, macOS/Windows vendor/app)
LAYEREDCONF_VENDOR = "vercheck"
LAYEREDCONF_APP = "vercheck"
LAYEREDCONF_SLUG = "vercheck"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for vercheck:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))  # noqa: T201
