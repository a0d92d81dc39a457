"""
Core Exceptions - Custom exception classes for Mangal.

This module defines the exception hierarchy used by the configuration
core and the CLI layer for error reporting and user feedback.
"""

from typing import Optional, Any


class MangalError(Exception):
    """Base exception class for all Mangal-specific errors."""

    def __init__(self, message: str, details: Optional[Any] = None):
        """
        Initialize Mangal error.

        Args:
            message: Human-readable error message
            details: Additional error details for debugging
        """
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(MangalError):
    """Raised when a configuration file cannot be loaded or assembled."""

    def __init__(self, message: str, config_path: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            config_path: Path to the problematic configuration file
            details: Additional error context
        """
        super().__init__(message, details)
        self.config_path = config_path


class ParseError(ConfigurationError):
    """Raised when a configuration document is not well-formed."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        config_path: Optional[str] = None,
        details: Optional[Any] = None,
    ):
        super().__init__(message, config_path, details)
        self.line = line
        self.column = column


class ValidationError(MangalError):
    """Raised when an assembled configuration breaks a business rule."""

    def __init__(self, message: str, field_name: Optional[str] = None, invalid_value: Optional[Any] = None, details: Optional[Any] = None):
        """
        Initialize validation error.

        Args:
            message: Error description
            field_name: Name of the field that failed validation
            invalid_value: The invalid value that caused the error
            details: Additional error context
        """
        super().__init__(message, details)
        self.field_name = field_name
        self.invalid_value = invalid_value


class SourceError(MangalError):
    """Raised when a manga source is structurally invalid."""

    def __init__(self, message: str, source_name: Optional[str] = None, details: Optional[Any] = None):
        """
        Initialize source error.

        Args:
            message: Error description
            source_name: Name of the problematic source
            details: Additional error context
        """
        super().__init__(message, details)
        self.source_name = source_name


class AnilistError(MangalError):
    """Raised when the Anilist client cannot be constructed."""


# Export all exception classes
__all__ = [
    "MangalError",
    "ConfigurationError",
    "ParseError",
    "ValidationError",
    "SourceError",
    "AnilistError",
]
