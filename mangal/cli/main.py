"""
CLI Main Application - Typer app entry point.

This module provides the ``mangal`` command, its global options and the
configuration-related commands.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.traceback import install as install_rich_traceback

from mangal import __version__
from mangal.cli.context import AppContext, get_app_context
from mangal.cli.display import create_config_summary, create_formats_table
from mangal.core.cleanup import cleanup
from mangal.core.config_defaults import default_config_bytes
from mangal.core.exceptions import ConfigurationError, MangalError
from mangal.core.loader import FallbackReason, config_file_location
from mangal.core.paths import APP_NAME
from mangal.core.validator import find_config_error
from mangal.ui import get_console, handle_error, display_warning, display_info


# Create main Typer application
app = typer.Typer(
    name="mangal",
    help="📖 Mangal - a fast and flexible manga downloader",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        get_console().print(f"{APP_NAME} version [success]{__version__}[/success]")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Use config from path",
        dir_okay=False,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed logging",
    ),
) -> None:
    """
    📖 Mangal - manga downloader.

    Loads and validates the configuration used by the downloader.
    """
    _setup_logging(debug)
    install_rich_traceback(show_locals=debug)

    if config is not None and not config.exists():
        handle_error(ConfigurationError(f"config at path {config} doesn't exist", str(config)))
        raise typer.Exit(1)

    ctx.obj = AppContext(config_path=config, debug=debug)


def _setup_logging(debug: bool = False) -> None:
    """
    Set up application logging.

    Args:
        debug: Enable debug logging
    """
    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


@app.command(name="check")
def check_config(
    ctx: typer.Context,
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on an unusable config file instead of using defaults",
    ),
) -> None:
    """✅ Load and validate the configuration."""
    app_context = get_app_context(ctx)

    try:
        result = app_context.load(strict=strict)
    except MangalError as e:
        handle_error(e, "While loading configuration", show_traceback=app_context.debug)
        raise typer.Exit(1)

    if result.used_defaults and result.fallback_reason is not FallbackReason.MISSING:
        display_warning(
            f"Configuration at {result.path} could not be used ({result.fallback_reason.value}).\n"
            "Falling back to the default configuration.",
            "⚠️  Using defaults"
        )

    error = find_config_error(result.config)
    if error is not None:
        handle_error(error, "While validating configuration", show_traceback=app_context.debug)
        raise typer.Exit(1)

    get_console().print(create_config_summary(result.config))


@app.command(name="formats")
def show_formats() -> None:
    """📚 Show available output formats."""
    get_console().print(create_formats_table())


@app.command(name="where")
def where_config(
    edit: bool = typer.Option(False, "--edit", "-e", help="Open in the editor"),
) -> None:
    """📍 Show path where config is located."""
    try:
        config_path = config_file_location()
    except (OSError, RuntimeError) as e:
        handle_error(ConfigurationError(f"Can't get config location: {e}"))
        raise typer.Exit(1)

    console = get_console()

    if config_path.exists():
        if edit:
            if typer.launch(str(config_path)) != 0:
                handle_error(ConfigurationError("Can not open the editor", str(config_path)))
                raise typer.Exit(1)
            return

        console.print(f"Config exists at\n[path]{config_path}[/path]")
    else:
        console.print(f"Config doesn't exist, but it is expected to be at\n[path]{config_path}[/path]")


@app.command(name="init")
def init_config(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """📝 Create default config at default path."""
    try:
        config_path = config_file_location()
    except (OSError, RuntimeError) as e:
        handle_error(ConfigurationError(f"Can't get config location: {e}"))
        raise typer.Exit(1)

    if config_path.exists() and not force:
        handle_error(ConfigurationError(
            "Config file already exists. Use --force to overwrite it",
            str(config_path)
        ))
        raise typer.Exit(1)

    try:
        config_path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        config_path.write_bytes(default_config_bytes())
    except OSError as e:
        handle_error(ConfigurationError(f"Error while writing config: {e}", str(config_path)))
        raise typer.Exit(1)

    display_info(f"Config created at\n{config_path}", "✅ Config Created")


@app.command(name="cleanup")
def cleanup_files() -> None:
    """🧹 Remove cached and temp files."""
    report = cleanup()
    get_console().print(
        f"🧹 {report.files_removed} files removed. Cleaned up {report.megabytes_removed:.2f}MB"
    )


@app.command(name="version")
def show_version() -> None:
    """🏷️  Show version."""
    get_console().print(f"{APP_NAME} version {__version__}")


def cli_main() -> None:
    """
    Main CLI entry point for the mangal command.
    """
    try:
        app()
    except KeyboardInterrupt:
        console = get_console()
        console.print("\n[warning]Operation cancelled by user[/warning]")
        sys.exit(130)
    except Exception as e:
        handle_error(e, "Unexpected error in CLI")
        sys.exit(1)


# Export main components
__all__ = [
    "app",
    "cli_main",
]
