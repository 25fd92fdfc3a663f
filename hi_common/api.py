"""Public API surface for hi_common."""

from hi_common.errors import (
    HostInfoError,
    error_to_payload,
)
from hi_common.logging import configure_logging

__all__ = ["configure_logging", "HostInfoError", "error_to_payload"]
