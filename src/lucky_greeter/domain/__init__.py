"""Domain value objects and pure rules for the greeter."""

from __future__ import annotations

from .features import LUCKY_NUMBER, PRINT_42, FeatureFlags
from .greeting import (
    ALT_GREETING,
    CANONICAL_GREETING,
    LUCKY_RANGE,
    LuckyRange,
    build_greeting,
    format_lucky_number,
)

__all__ = [
    "ALT_GREETING",
    "CANONICAL_GREETING",
    "FeatureFlags",
    "LUCKY_NUMBER",
    "LUCKY_RANGE",
    "LuckyRange",
    "PRINT_42",
    "build_greeting",
    "format_lucky_number",
]
