"""Shared error taxonomy for hostinfo."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class HostInfoError(Exception):
    """Base error type for typed failure handling."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class OptionError(HostInfoError):
    """Malformed command line."""


class UnknownOptionError(OptionError):
    """An option token that is not part of the grammar."""


class MissingArgumentError(OptionError):
    """A value-taking option was given no value."""


class UnexpectedArgumentError(OptionError):
    """A flag was given an inline value (``--users=x``)."""


class ActionError(HostInfoError):
    """The invocation does not ask for any work."""


class NoActionSelectedError(ActionError):
    """Neither users nor processes were requested."""


class PathError(HostInfoError):
    """A redirection target cannot be written."""


class PathIsDirectoryError(PathError):
    """The target path names an existing directory."""


class ParentDirectoryMissingError(PathError):
    """The directory holding the target does not exist."""


class ParentDirectoryNotWritableError(PathError):
    """The directory holding the target denies write access."""


class CannotCreateFileError(PathError):
    """Creating or truncating the target failed."""


class CollaboratorError(HostInfoError):
    """Failure inside an external data source."""


class ListingUnavailableError(CollaboratorError):
    """The account database or process table could not be read."""


def error_to_payload(error: HostInfoError) -> dict[str, Any]:
    """Convert a HostInfoError to a flat payload suitable for structured logs."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
