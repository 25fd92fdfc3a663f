"""Shared logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

import structlog

from hi_common.config.env import parse_bool_env, parse_int_env

HANDLER_NAME = "hostinfo"
DEFAULT_LEVEL = logging.WARNING


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return DEFAULT_LEVEL
    if isinstance(value, int):
        return value
    numeric = parse_int_env(value)
    if numeric is not None:
        return numeric
    return logging.getLevelNamesMapping().get(value.upper(), DEFAULT_LEVEL)


def _is_tty(stream: IO[str]) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    stream: IO[str] | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Configure stdlib logging and structlog with a shared formatter.

    Log records go to ``stream`` (standard error by default). Calling again
    with ``force=True`` replaces the handler installed by a previous call,
    which is how the log stream follows a redirected error sink.
    """
    env_level = os.environ.get("HOSTINFO_LOG_LEVEL")
    env_json = parse_bool_env(os.environ.get("HOSTINFO_LOG_JSON"))

    resolved_level = _resolve_level(level or env_level, debug)
    resolved_json = env_json if json is None else json
    resolved_stream = stream if stream is not None else sys.stderr

    root_logger = logging.getLogger()
    ours = [handler for handler in root_logger.handlers if handler.get_name() == HANDLER_NAME]
    if ours and not force:
        _configure_structlog()
        return

    renderer: structlog.types.Processor
    if resolved_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=_is_tty(resolved_stream))

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )

    for handler in ours:
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(resolved_stream)
    stream_handler.set_name(HANDLER_NAME)
    stream_handler.setFormatter(formatter)

    root_logger.setLevel(resolved_level)
    root_logger.addHandler(stream_handler)

    _configure_structlog()
