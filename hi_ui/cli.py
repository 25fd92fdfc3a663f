"""
Command-line interface for hostinfo.

The typer command accepts the raw argument vector and hands it to the
hostinfo option grammar; typer only provides the console script and the
process exit status.
"""

from __future__ import annotations

import sys
from typing import IO, List

import typer
from typer.core import TyperCommand

from hi_app.api import InspectService
from hi_common.api import configure_logging
from hi_runner.api import DEFAULT_PROG, StreamSinks
from hi_ui.adapters import ConsoleUIAdapter

EXIT_INTERRUPTED = 130
RAW_ARGS_KEY = "hostinfo.raw_args"

inspect_service = InspectService(prog=DEFAULT_PROG)

app = typer.Typer(
    help="Report local user accounts and running processes.",
    add_completion=False,
)


class RawArgsCommand(TyperCommand):
    """Keep the argument vector exactly as given, before click drops ``--``."""

    def parse_args(self, ctx: typer.Context, args: List[str]) -> List[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


def _pass_undecodable_bytes(stream: IO[str]) -> None:
    # command lines may hold bytes that are not valid in the locale encoding
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")


@app.command(
    cls=RawArgsCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def run(ctx: typer.Context) -> None:
    """List users and/or processes, optionally redirecting output streams."""
    argv = ctx.meta.get(RAW_ARGS_KEY, ctx.args)
    _pass_undecodable_bytes(sys.stdout)
    _pass_undecodable_bytes(sys.stderr)
    sinks = StreamSinks()
    configure_logging(stream=sinks.err, force=True)
    try:
        with sinks:
            code = inspect_service.run(list(argv), sinks, ConsoleUIAdapter(sinks))
    except KeyboardInterrupt:
        code = EXIT_INTERRUPTED
    finally:
        # redirected files are closed; log to the real stderr again
        configure_logging(force=True)
    raise typer.Exit(code)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
