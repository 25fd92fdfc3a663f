"""
Process table collector.

This module lists running processes using the psutil library.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator

import psutil

from hi_common.errors import ListingUnavailableError

logger = logging.getLogger(__name__)

PROCESS_ATTRS = ["pid", "name", "cmdline"]


@dataclass(frozen=True)
class ProcessEntry:
    """A process id and its command line."""

    pid: int
    command: str

    def format(self) -> str:
        return f"{self.pid:>7} {self.command}"


def describe_command(info: Dict[str, Any]) -> str:
    """Render a command the way ``ps -o command=`` does.

    Processes without an argv (kernel threads, zombies, or entries we may not
    inspect) show their name in brackets.
    """
    cmdline = info.get("cmdline")
    if cmdline:
        return " ".join(cmdline)
    return f"[{info.get('name') or '?'}]"


def iter_processes() -> Iterator[ProcessEntry]:
    """
    Yield running processes ordered by pid.

    Processes that exit or deny access during the scan are skipped by psutil.

    Raises:
        ListingUnavailableError: If the process table cannot be read at all.
    """
    try:
        entries = [
            ProcessEntry(pid=proc.info["pid"], command=describe_command(proc.info))
            for proc in psutil.process_iter(PROCESS_ATTRS)
        ]
    except (psutil.Error, OSError) as exc:
        raise ListingUnavailableError("failed to retrieve the process list", cause=exc) from exc

    entries.sort(key=lambda entry: entry.pid)
    logger.debug("Collected %d processes", len(entries))
    yield from entries
