"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``pyproject.toml``; the layered-configuration identifiers
(vendor, app, slug) decide where configuration files are discovered.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "gcpconf"
title: Final[str] = "Resolve and validate cloud provider configuration"
version: Final[str] = "0.4.0"
homepage: Final[str] = "https://github.com/gcpconf/gcpconf"
author: Final[str] = "gcpconf maintainers"
author_email: Final[str] = "maintainers@gcpconf.dev"
shell_command: Final[str] = "gcpconf"

#: lib_layered_config identifiers.
LAYEREDCONF_VENDOR: Final[str] = "gcpconf"
LAYEREDCONF_APP: Final[str] = "gcpconf"
LAYEREDCONF_SLUG: Final[str] = "gcpconf"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for gcpconf:
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
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
