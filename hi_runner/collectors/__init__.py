"""Data sources listed by hostinfo."""

from .processes import ProcessEntry, iter_processes
from .users import UserEntry, iter_users

__all__ = ["ProcessEntry", "UserEntry", "iter_processes", "iter_users"]
