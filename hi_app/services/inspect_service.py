"""
Service that runs one hostinfo invocation end to end.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Protocol, Sequence

from hi_app.ui_interfaces import UIAdapter
from hi_common.errors import HostInfoError, NoActionSelectedError, error_to_payload
from hi_common.logging import configure_logging
from hi_runner.api import (
    DEFAULT_PROG,
    Options,
    StreamSinks,
    apply_redirection,
    format_usage,
    iter_processes,
    iter_users,
    parse_options,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class _Formattable(Protocol):
    def format(self) -> str: ...


Lister = Callable[[], Iterable[_Formattable]]


class InspectService:
    """Parse, redirect, then list users and processes in that order."""

    def __init__(
        self,
        user_lister: Optional[Lister] = None,
        process_lister: Optional[Lister] = None,
        prog: str = DEFAULT_PROG,
    ):
        self.user_lister = user_lister or iter_users
        self.process_lister = process_lister or iter_processes
        self.prog = prog

    def run(self, argv: Sequence[str], sinks: StreamSinks, ui: UIAdapter) -> int:
        """Execute one invocation and return its exit code.

        Every HostInfoError ends the invocation: it is reported once on the
        error sink current at the time it was raised and mapped to exit code 1.
        """
        try:
            options = parse_options(argv)
            if options.help_requested:
                ui.show_text(format_usage(self.prog))
                return EXIT_OK
            self._execute(options, sinks, ui)
        except NoActionSelectedError as exc:
            ui.show_error(str(exc))
            ui.show_text("", err=True)
            ui.show_text(format_usage(self.prog), err=True)
            return EXIT_FAILURE
        except HostInfoError as exc:
            logger.debug("Invocation failed: %s", error_to_payload(exc))
            ui.show_error(str(exc))
            return EXIT_FAILURE
        return EXIT_OK

    def _execute(self, options: Options, sinks: StreamSinks, ui: UIAdapter) -> None:
        if not options.has_action:
            raise NoActionSelectedError(
                "no action specified, use -u/--users or -p/--processes"
            )

        apply_redirection(options, sinks)
        if sinks.err_redirected:
            configure_logging(stream=sinks.err, force=True)
        if options.operands:
            logger.debug("Ignoring operands: %s", list(options.operands))

        if options.do_users:
            self._emit(self.user_lister(), ui)
        if options.do_processes:
            self._emit(self.process_lister(), ui)

    def _emit(self, entries: Iterable[_Formattable], ui: UIAdapter) -> None:
        for entry in entries:
            ui.write_line(entry.format())
