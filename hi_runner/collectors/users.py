"""
User account collector.

Reads the local account database and yields one entry per account,
sorted by user name.
"""

from __future__ import annotations

import logging
import pwd
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

from hi_common.errors import ListingUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserEntry:
    """A user name and its home directory."""

    name: str
    home: str

    def format(self) -> str:
        return f"{self.name:<20} {self.home}"


def iter_users(source: Optional[Callable[[], Iterable[Any]]] = None) -> Iterator[UserEntry]:
    """
    Yield account entries ordered by name (home directory breaks ties).

    Args:
        source: Callable returning ``pwd.struct_passwd``-like records.
            Defaults to ``pwd.getpwall``.

    Raises:
        ListingUnavailableError: If the account database cannot be read.
    """
    reader = source or pwd.getpwall
    try:
        records = list(reader())
    except OSError as exc:
        raise ListingUnavailableError("failed to read the user account database", cause=exc) from exc

    entries = sorted(
        (UserEntry(name=record.pw_name, home=record.pw_dir) for record in records),
        key=lambda entry: (entry.name, entry.home),
    )
    logger.debug("Collected %d user accounts", len(entries))
    yield from entries
