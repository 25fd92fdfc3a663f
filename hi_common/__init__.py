"""Shared helpers for hostinfo."""

from hi_common.api import HostInfoError, configure_logging, error_to_payload

__all__ = ["configure_logging", "HostInfoError", "error_to_payload"]
