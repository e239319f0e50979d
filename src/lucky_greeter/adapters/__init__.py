"""Concrete adapters implementing the application ports."""

from __future__ import annotations

from .console import RichConsoleOutput
from .diagnostics import coerce_level, install_rich_logging
from .random_source import SystemRandomSource

__all__ = [
    "RichConsoleOutput",
    "SystemRandomSource",
    "coerce_level",
    "install_rich_logging",
]
