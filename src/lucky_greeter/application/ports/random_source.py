"""Random source port.

Purpose
-------
Narrow the dependency on a random-number generator to a single capability so
the use case can be driven by a deterministic fake in tests and by an unseeded
generator in production.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSourcePort(Protocol):
    """Draw integers uniformly from a closed interval."""

    def draw(self, low: int, high: int) -> int:
        """Return an integer ``n`` with ``low <= n <= high``."""


__all__ = ["RandomSourcePort"]
