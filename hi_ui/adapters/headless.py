"""Headless UI adapter for deterministic test-friendly output."""

from __future__ import annotations

from hi_app.ui_interfaces import UIAdapter
from hi_runner.api import StreamSinks


class HeadlessUIAdapter(UIAdapter):
    """A deterministic, print-based UI adapter suitable for tests and non-TTY runs."""

    def __init__(self, sinks: StreamSinks):
        self.sinks = sinks

    def show_error(self, message: str) -> None:
        self.sinks.err.write(f"Error: {message}\n")
        self.sinks.err.flush()

    def show_text(self, text: str, *, err: bool = False) -> None:
        stream = self.sinks.err if err else self.sinks.out
        stream.write(text + "\n")
        stream.flush()

    def write_line(self, line: str) -> None:
        self.sinks.out.write(line + "\n")
