"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` by ``tests/test_metadata_sync.py``.

Contents:
    * Metadata constants (name, version, homepage, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by lib_layered_config path discovery.
    * :func:`print_info` - Render the metadata block for the ``info`` command.
"""

from __future__ import annotations

name = "hellolib"
title = "Tiny greeting library for exercising build, install and load pipelines"
version = "1.0.0"
homepage = "https://github.com/bitranox/hellolib"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "hellolib"

#: Vendor segment used for macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application segment used for macOS/Windows configuration paths.
LAYEREDCONF_APP: str = "Hellolib"
#: Slug used for Linux XDG configuration paths and environment prefixes.
LAYEREDCONF_SLUG: str = "hellolib"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hellolib:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
