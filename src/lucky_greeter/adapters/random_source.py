"""Random source adapter backed by :class:`random.Random`.

Wraps a private generator instance instead of the module-level functions so
callers can inject a seeded :class:`random.Random` for reproducible runs while
production draws stay unseeded.
"""

from __future__ import annotations

import random

from lucky_greeter.application.ports.random_source import RandomSourcePort


class SystemRandomSource(RandomSourcePort):
    """Draw uniform integers from a non-cryptographic generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Use ``rng`` when given, otherwise an OS-seeded private generator."""
        self._rng = rng if rng is not None else random.Random()

    def draw(self, low: int, high: int) -> int:
        """Return an integer from ``[low, high]`` inclusive.

        Examples
        --------
        >>> source = SystemRandomSource(random.Random(0))
        >>> 1 <= source.draw(1, 100) <= 100
        True
        >>> source.draw(3, 3)
        3
        """
        if low > high:
            raise ValueError(f"cannot draw from empty range [{low}, {high}]")
        return self._rng.randint(low, high)


__all__ = ["SystemRandomSource"]
