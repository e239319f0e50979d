"""Output port describing line-oriented standard-output emission."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputPort(Protocol):
    """Write newline-terminated lines to the user-facing stream."""

    def write_line(self, text: str) -> None:
        """Emit ``text`` followed by a single newline."""


__all__ = ["OutputPort"]
