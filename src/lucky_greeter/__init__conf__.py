"""Static package metadata and the build-time feature table.

Purpose
-------
Keep the values that packaging, the CLI banner, and the feature resolution
share in one importable place. ``FEATURES`` plays the role of a compiled-in
feature set: it is fixed when the distribution is built and only overridden at
startup through the environment (see :mod:`lucky_greeter.config`).
"""

from __future__ import annotations

from typing import Callable, Mapping

name = "lucky_greeter"
title = "Print a greeting and, optionally, a lucky number"
version = "0.1.0"
homepage = "https://github.com/bitranox/lucky_greeter"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lucky-greeter"

FEATURES: Mapping[str, bool] = {
    "print-42": False,
    "lucky-number": False,
}
#: Build-time feature defaults keyed by feature name.


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner, one ``key = value`` line per field.

    Parameters
    ----------
    writer:
        Callable receiving each newline-terminated line; defaults to ``print``
        without an extra newline.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lucky_greeter:\\n'
    """

    emit = writer if writer is not None else (lambda text: print(text, end=""))
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(key) for key, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for key, value in fields:
        emit(f"    {key:<{pad}} = {value}\n")


__all__ = [
    "FEATURES",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
