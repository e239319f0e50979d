"""Greet use case: the whole program run as one straight-line sequence.

Purpose
-------
Print the greeting selected by the feature flags and, when enabled, a lucky
number drawn from :data:`lucky_greeter.domain.LUCKY_RANGE`.

Contents
--------
* :class:`GreetingResult` - what one invocation emitted.
* :func:`create_greet` - factory binding flags and ports into a callable.

System Role
-----------
Sits between the domain rules in :mod:`lucky_greeter.domain` and the adapters
wired by :func:`lucky_greeter.run`. It never reads configuration itself; the
flags are resolved once by the caller and passed in.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from lucky_greeter.application.ports.output import OutputPort
from lucky_greeter.application.ports.random_source import RandomSourcePort
from lucky_greeter.domain import LUCKY_RANGE, FeatureFlags, LuckyRange, build_greeting, format_lucky_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GreetingResult:
    """Lines produced by a single greet call."""

    greeting: str
    lucky_number: int | None = None

    @property
    def lines(self) -> tuple[str, ...]:
        """Return the emitted lines in output order.

        >>> GreetingResult("42", 7).lines
        ('42', 'Your lucky number: 7')
        """

        if self.lucky_number is None:
            return (self.greeting,)
        return (self.greeting, format_lucky_number(self.lucky_number))


def create_greet(
    *,
    features: FeatureFlags,
    random_source: RandomSourcePort,
    output: OutputPort,
    lucky_range: LuckyRange = LUCKY_RANGE,
) -> Callable[[], GreetingResult]:
    """Return a callable that performs one greet run.

    Parameters
    ----------
    features:
        Flags resolved at startup.
    random_source:
        Consulted exactly once per call, and only when
        ``features.enable_random`` is set.
    output:
        Receives one line for the greeting and one for the lucky number.
    lucky_range:
        Inclusive bounds for the draw.

    Examples
    --------
    >>> class _Fixed:
    ...     def draw(self, low, high):
    ...         return high
    >>> class _Lines(list):
    ...     def write_line(self, text):
    ...         self.append(text)
    >>> out = _Lines()
    >>> greet = create_greet(features=FeatureFlags(enable_random=True), random_source=_Fixed(), output=out)
    >>> greet().lucky_number
    100
    >>> out
    ['Hello, world!', 'Your lucky number: 100']
    """

    def greet() -> GreetingResult:
        logger.debug("greeting with features %s", features.to_mapping())
        greeting = build_greeting(features.print_alt)
        output.write_line(greeting)
        if not features.enable_random:
            return GreetingResult(greeting)

        number = random_source.draw(lucky_range.low, lucky_range.high)
        if number not in lucky_range:
            raise ValueError(f"random source returned {number!r} outside [{lucky_range.low}, {lucky_range.high}]")
        logger.debug("drew lucky number %d", number)
        output.write_line(format_lucky_number(number))
        return GreetingResult(greeting, number)

    return greet


__all__ = ["GreetingResult", "create_greet"]
