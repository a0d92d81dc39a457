"""
Error Handler - Error displays with context and suggestions.

This module renders configuration, validation and source errors as
Rich panels with actionable suggestions.
"""

import traceback
from typing import List, Optional, Tuple

from rich.markup import escape
from rich.panel import Panel

from mangal.core.exceptions import (
    MangalError,
    ConfigurationError,
    ParseError,
    ValidationError,
    SourceError,
    AnilistError,
)
from mangal.ui.console import get_console


class ErrorHandler:
    """Handles error display with consistent formatting and helpful context."""

    def handle_error(
        self,
        error: Exception,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """
        Handle and display an error with appropriate formatting.

        Args:
            error: Exception to handle
            context: Additional context about where the error occurred
            show_traceback: Whether to show the full traceback
        """
        if isinstance(error, MangalError):
            title, lines, suggestions = self._describe_mangal_error(error)
        else:
            title = "💥 Unexpected Error"
            lines = [f"[error]{error.__class__.__name__}: {escape(str(error))}[/error]"]
            suggestions = [
                "Check the command syntax and arguments",
                "Try running the command again with [path]--debug[/path]",
                "Report this issue if it persists",
            ]

        if context:
            lines.append(f"\n[muted]Context:[/muted] {context}")

        if suggestions:
            lines.append("\n\n[info]💡 Suggestions:[/info]")
            lines.extend(f"• {suggestion}" for suggestion in suggestions)

        if show_traceback:
            lines.append(f"\n\n[muted]Traceback:[/muted]\n{traceback.format_exc()}")

        panel = Panel(
            "\n".join(lines),
            title=title,
            border_style="red",
            padding=(1, 2)
        )

        get_console().print(panel)

    def _describe_mangal_error(self, error: MangalError) -> Tuple[str, List[str], List[str]]:
        lines = [f"[error]{escape(error.message)}[/error]"]

        if isinstance(error, ConfigurationError):
            if error.config_path:
                lines.append(f"\n[muted]Configuration file:[/muted] [path]{escape(error.config_path)}[/path]")
            if isinstance(error, ParseError) and error.line is not None:
                lines.append(f"\n[muted]Line:[/muted] {error.line}, [muted]column:[/muted] {error.column}")
            return "⚙️  Configuration Error", lines, [
                "Check configuration file syntax",
                "Use [path]mangal where[/path] to find the configuration file",
                "Recreate it with [path]mangal init --force[/path]",
            ]

        if isinstance(error, ValidationError):
            if error.field_name:
                lines.append(f"\n[muted]Field:[/muted] [path]{error.field_name}[/path]")
            return "✅ Validation Error", lines, [
                "Fix the field in your configuration file",
                "Compare with the defaults written by [path]mangal init[/path]",
            ]

        if isinstance(error, SourceError):
            if error.source_name:
                lines.append(f"\n[muted]Source:[/muted] [path]{error.source_name}[/path]")
            return "🔌 Source Error", lines, [
                "Check the selectors and urls of the source section",
                "Remove the source from [path]use[/path] to disable it",
            ]

        if isinstance(error, AnilistError):
            return "🔑 Anilist Error", lines, [
                "Check the id and secret in the [path]\\[anilist][/path] section",
                "Disable the integration with [path]enabled = false[/path]",
            ]

        if error.details:
            lines.append(f"\n[muted]Details:[/muted] {escape(str(error.details))}")
        return "❌ Error", lines, []

    def display_warning(self, message: str, title: str = "⚠️  Warning") -> None:
        """Display a warning message."""
        panel = Panel(
            f"[warning]{message}[/warning]",
            title=f"[warning]{title}[/warning]",
            border_style="yellow",
            padding=(1, 2)
        )

        get_console().print(panel)

    def display_info(self, message: str, title: str = "ℹ️  Information") -> None:
        """Display an information message."""
        panel = Panel(
            f"[info]{message}[/info]",
            title=f"[info]{title}[/info]",
            border_style="blue",
            padding=(1, 2)
        )

        get_console().print(panel)


# Global error handler instance
_error_handler = ErrorHandler()


def handle_error(
    error: Exception,
    context: Optional[str] = None,
    show_traceback: bool = False
) -> None:
    """
    Handle and display an error using the global error handler.

    Args:
        error: Exception to handle
        context: Additional context
        show_traceback: Whether to show traceback
    """
    _error_handler.handle_error(error, context, show_traceback)


def display_warning(message: str, title: str = "⚠️  Warning") -> None:
    """Display a warning message using the global error handler."""
    _error_handler.display_warning(message, title)


def display_info(message: str, title: str = "ℹ️  Information") -> None:
    """Display an information message using the global error handler."""
    _error_handler.display_info(message, title)


# Export error handling functions
__all__ = [
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
]
