"""
UI adapters rendering onto the sinks of an invocation.
"""

from hi_app.ui_interfaces import UIAdapter  # re-export contract
from hi_ui.adapters.console import ConsoleUIAdapter
from hi_ui.adapters.headless import HeadlessUIAdapter

__all__ = ["UIAdapter", "ConsoleUIAdapter", "HeadlessUIAdapter"]
