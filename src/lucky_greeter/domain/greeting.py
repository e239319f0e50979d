"""Greeting literals and lucky-number formatting.

Purpose
-------
Hold the pure pieces of the program: which line to greet with, the closed
range lucky numbers are drawn from, and how the lucky line reads. Nothing here
touches I/O or randomness, so the rules can be doctested in isolation.

Contents
--------
* :data:`CANONICAL_GREETING` / :data:`ALT_GREETING` - the two greeting lines.
* :class:`LuckyRange` and :data:`LUCKY_RANGE` - inclusive draw bounds.
* :func:`build_greeting`, :func:`format_lucky_number` - line builders.
"""

from __future__ import annotations

from dataclasses import dataclass

CANONICAL_GREETING = "Hello, world!"
ALT_GREETING = "42"
LUCKY_PREFIX = "Your lucky number: "


@dataclass(frozen=True, slots=True)
class LuckyRange:
    """Closed integer interval ``[low, high]``.

    Examples
    --------
    >>> 1 in LUCKY_RANGE and 100 in LUCKY_RANGE
    True
    >>> 0 in LUCKY_RANGE or 101 in LUCKY_RANGE
    False
    >>> LuckyRange(5, 1)
    Traceback (most recent call last):
    ...
    ValueError: empty lucky range: low=5 > high=1
    """

    low: int
    high: int

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValueError(f"empty lucky range: low={self.low} > high={self.high}")

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.low <= value <= self.high

    def __len__(self) -> int:
        return self.high - self.low + 1


LUCKY_RANGE = LuckyRange(1, 100)


def build_greeting(print_alt: bool) -> str:
    """Return the first output line.

    Examples
    --------
    >>> build_greeting(False)
    'Hello, world!'
    >>> build_greeting(True)
    '42'
    """

    return ALT_GREETING if print_alt else CANONICAL_GREETING


def format_lucky_number(number: int) -> str:
    """Return the lucky-number line for ``number``.

    >>> format_lucky_number(7)
    'Your lucky number: 7'
    """

    return f"{LUCKY_PREFIX}{number}"


__all__ = [
    "ALT_GREETING",
    "CANONICAL_GREETING",
    "LUCKY_PREFIX",
    "LUCKY_RANGE",
    "LuckyRange",
    "build_greeting",
    "format_lucky_number",
]
