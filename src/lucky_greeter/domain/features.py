"""Feature toggles selecting the program's output mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

PRINT_42 = "print-42"
LUCKY_NUMBER = "lucky-number"


@dataclass(frozen=True, slots=True)
class FeatureFlags:
    """Resolved switches for one invocation.

    Parameters
    ----------
    print_alt:
        Print ``42`` instead of the canonical greeting (feature ``print-42``).
    enable_random:
        Append a lucky-number line (feature ``lucky-number``).
    """

    print_alt: bool = False
    enable_random: bool = False

    @classmethod
    def from_mapping(cls, features: Mapping[str, bool]) -> "FeatureFlags":
        """Build flags from a ``{feature-name: enabled}`` table.

        Unknown feature names are rejected so typos in the build table surface
        immediately.

        Examples
        --------
        >>> FeatureFlags.from_mapping({"lucky-number": True})
        FeatureFlags(print_alt=False, enable_random=True)
        """

        unknown = set(features) - {PRINT_42, LUCKY_NUMBER}
        if unknown:
            raise ValueError(f"Unknown feature(s): {', '.join(sorted(unknown))}")
        return cls(
            print_alt=bool(features.get(PRINT_42, False)),
            enable_random=bool(features.get(LUCKY_NUMBER, False)),
        )

    def to_mapping(self) -> dict[str, bool]:
        """Return the flags keyed by feature name."""

        return {PRINT_42: self.print_alt, LUCKY_NUMBER: self.enable_random}


__all__ = ["FeatureFlags", "LUCKY_NUMBER", "PRINT_42"]
