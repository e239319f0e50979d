"""Protocols the greet use case depends on."""

from __future__ import annotations

from .output import OutputPort
from .random_source import RandomSourcePort

__all__ = ["OutputPort", "RandomSourcePort"]
