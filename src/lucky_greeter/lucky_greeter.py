"""Façade wiring configuration, adapters, and the greet use case.

Purpose
-------
Expose a small API for host code and the CLI: run the program once, print the
canonical greeting, draw a single lucky number, or render the metadata
banner. This module is the only composition point; inner layers never read
configuration or pick adapters themselves.

Contents
--------
* :func:`run` - resolve features once and perform one greet run.
* :func:`hello_world`, :func:`lucky_number` - single-purpose helpers.
* :func:`summary_info` - metadata banner including the resolved features.
"""

from __future__ import annotations

from .adapters import RichConsoleOutput, SystemRandomSource
from .application.ports import OutputPort, RandomSourcePort
from .application.use_cases.greet import GreetingResult, create_greet
from .config import resolve_features
from .domain import LUCKY_RANGE, FeatureFlags, build_greeting


def run(
    features: FeatureFlags | None = None,
    *,
    random_source: RandomSourcePort | None = None,
    output: OutputPort | None = None,
) -> GreetingResult:
    """Print the greeting and, when enabled, the lucky number.

    Parameters
    ----------
    features:
        Flags to use; resolved via :func:`lucky_greeter.config.resolve_features`
        when omitted.
    random_source:
        Defaults to an unseeded :class:`SystemRandomSource`.
    output:
        Defaults to :class:`RichConsoleOutput` on standard output.

    Returns
    -------
    GreetingResult
        The lines that were printed.

    Examples
    --------
    >>> run(FeatureFlags(print_alt=True)).lines
    42
    ('42',)
    """

    greet = create_greet(
        features=features if features is not None else resolve_features(),
        random_source=random_source if random_source is not None else SystemRandomSource(),
        output=output if output is not None else RichConsoleOutput(),
    )
    return greet()


def hello_world() -> None:
    """Print the canonical greeting regardless of the feature flags.

    >>> hello_world()
    Hello, world!
    """

    print(build_greeting(False))


def lucky_number(random_source: RandomSourcePort | None = None) -> int:
    """Return one number drawn from :data:`LUCKY_RANGE` without printing it.

    >>> 1 <= lucky_number() <= 100
    True
    """

    source = random_source if random_source is not None else SystemRandomSource()
    return source.draw(LUCKY_RANGE.low, LUCKY_RANGE.high)


def summary_info() -> str:
    """Return the metadata banner followed by the resolved feature table.

    >>> "print-42" in summary_info()
    True
    """

    from . import __init__conf__

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    lines.append("\n")
    lines.append("    features:\n")
    for feature, enabled in resolve_features().to_mapping().items():
        lines.append(f"        {feature:<12} = {'on' if enabled else 'off'}\n")
    return "".join(lines)


__all__ = ["hello_world", "lucky_number", "run", "summary_info"]
