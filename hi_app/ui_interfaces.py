"""App-level UI contract."""

from __future__ import annotations

from typing import Protocol


class UIAdapter(Protocol):
    """Minimal interface for presentation concerns.

    Implementations write to the current sinks of the invocation, so output
    follows any redirection applied after the adapter was created.
    """

    def show_error(self, message: str) -> None:
        """Render an error message on the error sink."""

    def show_text(self, text: str, *, err: bool = False) -> None:
        """Render free text (usage, blank lines) on the output or error sink."""

    def write_line(self, line: str) -> None:
        """Write one listing line verbatim to the output sink."""
