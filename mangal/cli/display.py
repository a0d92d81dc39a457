"""
Display Helpers - Rich tables for configuration and formats.
"""

from rich.markup import escape
from rich.table import Table

from mangal.core.formats import FORMAT_DESCRIPTIONS, FormatType
from mangal.core.models import ResolvedConfig


def _flag(value: bool) -> str:
    return "[success]yes[/success]" if value else "[muted]no[/muted]"


def create_formats_table() -> Table:
    """Create a table listing the available output formats."""
    table = Table(title="📚 Available formats", show_header=True, header_style="accent")
    table.add_column("Format", style="path", no_wrap=True)
    table.add_column("Description")

    for fmt in FormatType:
        table.add_row(fmt.value, FORMAT_DESCRIPTIONS[fmt])

    return table


def create_config_summary(config: ResolvedConfig) -> Table:
    """
    Create a table summarizing the active configuration.

    Args:
        config: Resolved configuration

    Returns:
        Rich Table with one row per setting
    """
    table = Table(title="⚙️  Active configuration", show_header=True, header_style="accent")
    table.add_column("Setting", style="path", no_wrap=True)
    table.add_column("Value")

    table.add_row("sources", ", ".join(config.source_names))
    table.add_row("format", config.format)
    table.add_row("download path", escape(config.download_path))
    table.add_row("chapter name template", escape(config.chapter_name_template))
    table.add_row("cache images", _flag(config.cache_images))

    reader = escape(config.custom_reader) if config.use_custom_reader else "[muted]system default[/muted]"
    table.add_row("reader", reader)

    table.add_row("ui chapter name template", escape(config.ui.chapter_name_template))
    table.add_row("ui fullscreen", _flag(config.ui.fullscreen))

    anilist = "[success]enabled[/success]" if config.anilist.enabled else "[muted]disabled[/muted]"
    if config.anilist.enabled and config.anilist.mark_downloaded:
        anilist += " (marks downloaded chapters as read)"
    table.add_row("anilist", anilist)

    return table


__all__ = [
    "create_formats_table",
    "create_config_summary",
]
