"""Application services."""

from .inspect_service import EXIT_FAILURE, EXIT_OK, InspectService

__all__ = ["EXIT_FAILURE", "EXIT_OK", "InspectService"]
