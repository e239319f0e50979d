"""Public package surface for the greeter.

``import lucky_greeter`` and ``python -m lucky_greeter`` share the same
façade functions, so host code and the CLI always print identical lines.
"""

from __future__ import annotations

from .domain import FeatureFlags
from .lucky_greeter import hello_world, lucky_number, run, summary_info

__all__ = ["FeatureFlags", "hello_world", "lucky_number", "run", "summary_info"]
