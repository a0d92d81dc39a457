"""
CLI Layer - Typer commands for configuration management.
"""

from mangal.cli.main import app, cli_main

__all__ = [
    "app",
    "cli_main",
]
