"""Writability checks for redirection targets."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from hi_common.errors import (
    CannotCreateFileError,
    ParentDirectoryMissingError,
    ParentDirectoryNotWritableError,
    PathError,
    PathIsDirectoryError,
)

logger = logging.getLogger(__name__)


class PathProblem(str, Enum):
    """Reasons a path cannot be used as a redirection target."""

    PATH_IS_DIRECTORY = "path_is_directory"
    PARENT_DIRECTORY_MISSING = "parent_directory_missing"
    PARENT_DIRECTORY_NOT_WRITABLE = "parent_directory_not_writable"
    CANNOT_CREATE_FILE = "cannot_create_file"


_ERRORS: dict[PathProblem, type[PathError]] = {
    PathProblem.PATH_IS_DIRECTORY: PathIsDirectoryError,
    PathProblem.PARENT_DIRECTORY_MISSING: ParentDirectoryMissingError,
    PathProblem.PARENT_DIRECTORY_NOT_WRITABLE: ParentDirectoryNotWritableError,
    PathProblem.CANNOT_CREATE_FILE: CannotCreateFileError,
}


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of a path check."""

    path: str
    problem: Optional[PathProblem] = None
    directory: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.problem is None

    @classmethod
    def success(cls, path: str) -> "ValidationResult":
        return cls(path=path)

    @classmethod
    def failure(cls, path: str, problem: PathProblem, directory: Optional[str] = None) -> "ValidationResult":
        return cls(path=path, problem=problem, directory=directory)

    @property
    def message(self) -> str:
        if self.problem is PathProblem.PATH_IS_DIRECTORY:
            return f"'{self.path}' is a directory, a file path is required"
        if self.problem is PathProblem.PARENT_DIRECTORY_MISSING:
            return f"directory '{self.directory}' does not exist"
        if self.problem is PathProblem.PARENT_DIRECTORY_NOT_WRITABLE:
            return f"no write permission for directory '{self.directory}'"
        if self.problem is PathProblem.CANNOT_CREATE_FILE:
            return f"cannot open file '{self.path}' for writing"
        return f"'{self.path}' is writable"

    def raise_for_problem(self) -> None:
        """Raise the PathError matching this result; no-op when ok."""
        if self.problem is None:
            return
        context = {"path": self.path, "problem": self.problem.value}
        if self.directory is not None:
            context["directory"] = self.directory
        raise _ERRORS[self.problem](self.message, context=context)


def parent_directory(path: str) -> str:
    """Directory holding ``path``; a bare file name lives in ``.``."""
    return os.path.dirname(path) or "."


def validate_path(path: str) -> ValidationResult:
    """Check that ``path`` can receive output, truncating it on success.

    Checks run in order and the first failure wins: the path must not be a
    directory, its parent must exist and be writable, and the file must be
    creatable. A successful check leaves an empty file behind.
    """
    if os.path.isdir(path):
        return ValidationResult.failure(path, PathProblem.PATH_IS_DIRECTORY)

    directory = parent_directory(path)
    if not os.path.isdir(directory):
        return ValidationResult.failure(path, PathProblem.PARENT_DIRECTORY_MISSING, directory)
    if not os.access(directory, os.W_OK):
        return ValidationResult.failure(path, PathProblem.PARENT_DIRECTORY_NOT_WRITABLE, directory)

    try:
        with open(path, "w", encoding="utf-8"):
            pass
    except OSError as exc:
        logger.debug("Creating %s failed: %s", path, exc)
        return ValidationResult.failure(path, PathProblem.CANNOT_CREATE_FILE, directory)

    logger.debug("Validated redirection target %s", path)
    return ValidationResult.success(path)
