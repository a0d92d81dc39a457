"""
CLI Context - Application state passed to commands.

The root callback builds one AppContext and stores it on the Typer
context object; commands receive it from there instead of reaching for
module-level globals.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import typer

from mangal.core.loader import LoadResult, load_config


@dataclass
class AppContext:
    """Options of the current invocation and the configuration loaded for it."""

    config_path: Optional[Path] = None
    debug: bool = False
    _load_result: Optional[LoadResult] = field(default=None, repr=False)

    def load(self, strict: bool = False) -> LoadResult:
        """
        Load the configuration once per invocation.

        Raises:
            MangalError: If ``strict`` and the configuration cannot be used
        """
        if self._load_result is None:
            self._load_result = load_config(self.config_path, strict=strict)
        return self._load_result


def get_app_context(ctx: typer.Context) -> AppContext:
    """Get the AppContext of the running command."""
    app_context = ctx.find_object(AppContext)
    if app_context is None:
        app_context = AppContext()
        ctx.obj = app_context
    return app_context


__all__ = [
    "AppContext",
    "get_app_context",
]
