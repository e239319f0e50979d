"""Stderr diagnostics via :class:`rich.logging.RichHandler`.

Purpose
-------
Route the package's :mod:`logging` records to a stderr Rich console so that
debug output never interleaves with the standard-output contract.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_PACKAGE_LOGGER = "lucky_greeter"
_HANDLER_NAME = "lucky_greeter.rich"


def coerce_level(level: str | int) -> int:
    """Translate a level name or number into a :mod:`logging` constant.

    Examples
    --------
    >>> coerce_level("debug") == logging.DEBUG
    True
    >>> coerce_level(30)
    30
    >>> coerce_level("loud")
    Traceback (most recent call last):
    ...
    ValueError: Unknown log level: 'loud'
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def install_rich_logging(level: str | int = "WARNING", *, console: Console | None = None) -> logging.Handler:
    """Attach a single Rich handler to the package logger and return it.

    Calling again replaces the previously installed handler instead of adding
    a second one.
    """
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.set_name(_HANDLER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(coerce_level(level))
    return handler


__all__ = ["coerce_level", "install_rich_logging"]
