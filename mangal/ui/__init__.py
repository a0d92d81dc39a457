"""
UI Layer - Rich console and error display helpers for the CLI.
"""

from mangal.ui.console import get_console, setup_console
from mangal.ui.error_handler import ErrorHandler, handle_error, display_warning, display_info

__all__ = [
    # Console Management
    "get_console",
    "setup_console",
    # Error Handling
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
]
