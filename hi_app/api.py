"""Public API surface for hi_app."""

from hi_app.services import EXIT_FAILURE, EXIT_OK, InspectService
from hi_app.ui_interfaces import UIAdapter

__all__ = ["EXIT_FAILURE", "EXIT_OK", "InspectService", "UIAdapter"]
