"""Rich-powered stdout adapter implementing :class:`OutputPort`.

Purpose
-------
Send the program's lines to standard output through Rich while keeping the
text byte-for-byte: markup, highlighting, and wrapping are disabled so ``42``
never gains colour codes and long lines are never folded.
"""

from __future__ import annotations

from rich.console import Console

from lucky_greeter.application.ports.output import OutputPort


class RichConsoleOutput(OutputPort):
    """Write plain lines to a Rich console."""

    def __init__(self, *, console: Console | None = None) -> None:
        """Use ``console`` when given, otherwise a console bound to ``sys.stdout``.

        The default console resolves ``sys.stdout`` at print time, so stream
        redirection done after construction (pytest capture, Click's runner)
        is honoured.
        """
        self._console = console if console is not None else Console(highlight=False, soft_wrap=True)

    def write_line(self, text: str) -> None:
        """Print ``text`` followed by a newline.

        Examples
        --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> RichConsoleOutput(console=Console(file=buffer)).write_line("[b]42[/b]")
        >>> buffer.getvalue()
        '[b]42[/b]\\n'
        """
        self._console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


__all__ = ["RichConsoleOutput"]
