"""Use cases orchestrating domain rules through ports."""

from __future__ import annotations

from .greet import GreetingResult, create_greet

__all__ = ["GreetingResult", "create_greet"]
