"""
Mangal - A fast and flexible manga downloader.

This package holds the configuration core of the downloader: loading the
TOML configuration, merging it with the built-in defaults, activating the
enabled manga sources and validating the result.
"""

__version__ = "3.0.0"
__author__ = "Mangal Team"

# Package metadata
__title__ = "mangal"
__description__ = "A fast and flexible manga downloader"
__license__ = "MIT"

# Version info tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split(".")))

# Export main components for easy importing
from mangal.core import ResolvedConfig, resolve_config, validate_config
from mangal.cli.main import cli_main

__all__ = [
    "__version__",
    "__author__",
    "ResolvedConfig",
    "resolve_config",
    "validate_config",
    "cli_main",
]
