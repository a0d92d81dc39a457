"""
Platform Paths - Per-user configuration, cache and temp locations.
"""

import os
import sys
import tempfile
from pathlib import Path

import typer


APP_NAME = "Mangal"
CONFIG_FILE_NAME = "config.toml"


def user_config_dir() -> Path:
    """Get the per-user configuration directory for Mangal."""
    return Path(typer.get_app_dir(APP_NAME.lower()))


def user_cache_root() -> Path:
    """
    Get the per-user cache directory for Mangal.

    Follows the platform convention: %LOCALAPPDATA% on Windows,
    ~/Library/Caches on macOS and $XDG_CACHE_HOME (or ~/.cache) elsewhere.
    """
    if sys.platform == "win32":
        base = os.environ.get("LOCALAPPDATA") or str(Path.home() / "AppData" / "Local")
    elif sys.platform == "darwin":
        base = str(Path.home() / "Library" / "Caches")
    else:
        base = os.environ.get("XDG_CACHE_HOME") or str(Path.home() / ".cache")

    return Path(base) / APP_NAME


def temp_root() -> Path:
    """Get the system temp directory downloads are staged in."""
    return Path(tempfile.gettempdir())


__all__ = [
    "APP_NAME",
    "CONFIG_FILE_NAME",
    "user_config_dir",
    "user_cache_root",
    "temp_root",
]
