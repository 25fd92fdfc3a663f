"""Command-line grammar for hostinfo.

Short options follow getopts conventions (clusters such as ``-up``, attached
values such as ``-l/tmp/out``); long options accept ``--log PATH`` and
``--log=PATH``. Parsing stops at ``--``, at the first operand, or as soon as
help is requested.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from hi_common.errors import (
    MissingArgumentError,
    UnexpectedArgumentError,
    UnknownOptionError,
)

logger = logging.getLogger(__name__)

DEFAULT_PROG = "hostinfo"

_SHORT_FLAGS = {"u": "do_users", "p": "do_processes"}
_SHORT_VALUES = {"l": "log_path", "e": "err_path"}
_LONG_FLAGS = {"users": "do_users", "processes": "do_processes"}
_LONG_VALUES = {"log": "log_path", "errors": "err_path"}
_HELP_SHORT = "h"
_HELP_LONG = "help"


class Options(BaseModel):
    """Parsed invocation, frozen once the parser returns it."""

    model_config = ConfigDict(frozen=True)

    do_users: bool = Field(default=False, description="List user accounts")
    do_processes: bool = Field(default=False, description="List running processes")
    log_path: Optional[str] = Field(default=None, description="Redirect standard output here")
    err_path: Optional[str] = Field(default=None, description="Redirect standard error here")
    help_requested: bool = Field(default=False, description="Print usage and stop")
    operands: Tuple[str, ...] = Field(default=(), description="Tokens left after option parsing")

    @property
    def has_action(self) -> bool:
        return self.do_users or self.do_processes


def _looks_like_option(token: str) -> bool:
    return token.startswith("-") and len(token) > 1


class OptionParser:
    """Single left-to-right pass over an argument vector."""

    def __init__(self, argv: Sequence[str]):
        self._args = list(argv)
        self._index = 0
        self._fields: dict[str, Any] = {}

    def parse(self) -> Options:
        while self._index < len(self._args):
            token = self._args[self._index]
            if token == "--":
                self._index += 1
                break
            if token.startswith("--"):
                self._index += 1
                stop = self._parse_long(token[2:])
            elif _looks_like_option(token):
                self._index += 1
                stop = self._parse_short(token[1:])
            else:
                break
            if stop:
                return Options(**self._fields)

        self._fields["operands"] = tuple(self._args[self._index:])
        options = Options(**self._fields)
        logger.debug("Parsed options: %s", options.model_dump())
        return options

    def _parse_long(self, word: str) -> bool:
        name, sep, inline = word.partition("=")
        if name == _HELP_LONG or name in _LONG_FLAGS:
            if sep:
                raise UnexpectedArgumentError(
                    f"option --{name} does not take an argument",
                    context={"option": name},
                )
            if name == _HELP_LONG:
                self._fields["help_requested"] = True
                return True
            self._fields[_LONG_FLAGS[name]] = True
            return False
        if name in _LONG_VALUES:
            value = inline if sep else self._take_value(f"--{name}", name)
            self._fields[_LONG_VALUES[name]] = value
            return False
        raise UnknownOptionError(f"unknown option --{name}", context={"option": name})

    def _parse_short(self, cluster: str) -> bool:
        for pos, letter in enumerate(cluster):
            if letter == _HELP_SHORT:
                self._fields["help_requested"] = True
                return True
            if letter in _SHORT_FLAGS:
                self._fields[_SHORT_FLAGS[letter]] = True
            elif letter in _SHORT_VALUES:
                # the rest of the cluster is the value (-l/tmp/out)
                rest = cluster[pos + 1:]
                value = rest if rest else self._take_value(f"-{letter}", letter)
                self._fields[_SHORT_VALUES[letter]] = value
                return False
            else:
                raise UnknownOptionError(f"unknown option -{letter}", context={"option": letter})
        return False

    def _take_value(self, flag: str, name: str) -> str:
        if self._index >= len(self._args) or _looks_like_option(self._args[self._index]):
            raise MissingArgumentError(
                f"option {flag} requires an argument",
                context={"option": name},
            )
        value = self._args[self._index]
        self._index += 1
        return value


def parse_options(argv: Sequence[str]) -> Options:
    """Parse ``argv`` (without the program name) into Options."""
    return OptionParser(argv).parse()


def format_usage(prog: str = DEFAULT_PROG) -> str:
    return f"""Usage: {prog} [OPTIONS]

Options:
  -u, --users          list user accounts and their home directories
  -p, --processes      list running processes (PID and command)
  -h, --help           show this help and exit

  -l, --log PATH       redirect standard output to the file at PATH
  -e, --errors PATH    redirect standard error to the file at PATH

Examples:
  {prog} -u
  {prog} --processes --log /tmp/proc.log
  {prog} -u -p -l logs/out.txt -e logs/err.txt"""
