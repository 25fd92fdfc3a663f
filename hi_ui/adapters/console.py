"""Rich-based console adapter used for all terminal output."""

from __future__ import annotations

from typing import IO

from rich.console import Console
from rich.theme import Theme

from hi_app.ui_interfaces import UIAdapter
from hi_runner.api import StreamSinks

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red",
        "success": "green",
        "accent": "#3ea6ff",
    }
)


class ConsoleUIAdapter(UIAdapter):
    """Styled diagnostics on whichever streams the sinks currently hold."""

    def __init__(self, sinks: StreamSinks):
        self.sinks = sinks
        self._consoles: dict[int, tuple[IO[str], Console]] = {}

    def _console(self, stream: IO[str]) -> Console:
        cached = self._consoles.get(id(stream))
        if cached is not None and cached[0] is stream:
            return cached[1]
        # Paths and command lines are printed verbatim: no markup, no wrapping.
        console = Console(
            theme=THEME,
            file=stream,
            highlight=False,
            markup=False,
            emoji=False,
            soft_wrap=True,
        )
        self._consoles[id(stream)] = (stream, console)
        return console

    def show_error(self, message: str) -> None:
        self._console(self.sinks.err).print(f"Error: {message}", style="error")

    def show_text(self, text: str, *, err: bool = False) -> None:
        stream = self.sinks.err if err else self.sinks.out
        self._console(stream).print(text)

    def write_line(self, line: str) -> None:
        self.sinks.out.write(line + "\n")
