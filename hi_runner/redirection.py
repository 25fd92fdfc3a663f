"""Apply --log/--errors redirection to the sinks of an invocation."""

from __future__ import annotations

import logging
from typing import Callable

from hi_runner.options import Options
from hi_runner.paths import validate_path
from hi_runner.streams import StreamSinks

logger = logging.getLogger(__name__)


def _redirect(path: str, rebind: Callable[[str], None]) -> None:
    result = validate_path(path)
    result.raise_for_problem()
    rebind(path)


def apply_redirection(options: Options, sinks: StreamSinks) -> None:
    """Validate and redirect standard output, then standard error.

    A failing check raises a PathError before its own sink changes, so the
    diagnostic reaches the error sink that was current before this call.
    Empty paths mean no redirection.
    """
    if options.log_path:
        _redirect(options.log_path, sinks.redirect_out)
    if options.err_path:
        _redirect(options.err_path, sinks.redirect_err)
    if not (options.log_path or options.err_path):
        logger.debug("No redirection requested")
