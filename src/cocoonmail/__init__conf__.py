"""Static package metadata surfaced to CLI commands and documentation.

Values here are kept in sync with ``pyproject.toml``. The layered
configuration identifiers decide where configuration files are searched and
deployed on each platform.
"""

from __future__ import annotations

name = "cocoonmail"
title = "Client library and CLI for the Cocoonmail transactional email API"
version = "1.0.0"
homepage = "https://cocoonmail.com"
author = "Cocoonmail"
author_email = "support@cocoonmail.com"
shell_command = "cocoonmail"

#: Vendor, application and slug identifiers used by lib_layered_config.
LAYEREDCONF_VENDOR: str = "cocoonmail"
LAYEREDCONF_APP: str = "cocoonmail"
LAYEREDCONF_SLUG: str = "cocoonmail"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for cocoonmail:
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
