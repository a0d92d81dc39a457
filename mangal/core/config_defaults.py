"""
Configuration Defaults - The embedded default configuration document.

The TOML text below is the single source of truth for default values.
It is parsed like any user file, written to disk by ``mangal init``
and assembled whenever a user configuration cannot be used.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from mangal.core.config_schemas import ConfigDocument

if TYPE_CHECKING:
    from mangal.core.models import ResolvedConfig


DEFAULT_CHAPTER_NAME_TEMPLATE = "[%0d] %s"
DEFAULT_UI_CHAPTER_NAME_TEMPLATE = "[%d] %s"

DEFAULT_CONFIG_TOML = """\
# Which sources to use. You can use several sources, it won't affect performance
use = ['manganelo']

# Type "mangal formats" to show more information about formats
format = "pdf"

# If false, then OS default reader will be used
use_custom_reader = false
custom_reader = "zathura"

# Custom download path, can be either relative (to the current directory) or absolute
download_path = '.'

# How chapters should be named when downloaded
# Use %d to specify chapter number and %s to specify chapter title
# If you want to pad chapter number with zeros for natural sorting (e.g. 0001, 0123) use %0d instead of %d
chapter_name_template = "[%0d] %s"

# Add images to cache
# If set to true mangal could crash when trying to redownload something quickly
# Usually happens on slow machines
cache_images = false

[anilist]
# Enable Anilist integration (BETA)
enabled = false

# Anilist client ID
id = ""

# Anilist client secret
secret = ""

# Will mark downloaded chapters as read on Anilist
mark_downloaded = false

[ui]
# How to display chapters in TUI mode
# Use %d to specify chapter number and %s to specify chapter title
chapter_name_template = "[%d] %s"

# Fullscreen mode
fullscreen = true

# Input prompt symbol
prompt = ">"

# Input placeholder
placeholder = "What shall we look for?"

# Selected chapter mark
mark = "▼"

# Search window title
title = "Mangal"

[sources]
[sources.manganelo]
# Base url
base = 'https://m.manganelo.com'

# Chapters Base url
chapters_base = 'https://chap.manganelo.com/'

# Search endpoint. Put %s where the query should be
search = 'https://m.manganelo.com/search/story/%s'

# Selector of entry anchor (<a></a>) on search page
manga_anchor = '.search-story-item a.item-title'

# Selector of entry title on search page
manga_title = '.search-story-item a.item-title'

# Manga chapters anchors selector
chapter_anchor = 'li.a-h a.chapter-name'

# Manga chapters titles selector
chapter_title = 'li.a-h a.chapter-name'

# Reader page images selector
reader_page = '.container-chapter-reader img'

# Random delay between requests
random_delay_ms = 500 # ms

# Are chapters listed in reversed order on that source?
# reversed order -> from newest chapter to oldest
reversed_chapters_order = true

# With what character should the whitespace in query be replaced?
whitespace_escape = "_"
"""


def default_config_bytes() -> bytes:
    """Get the default configuration document as UTF-8 bytes."""
    return DEFAULT_CONFIG_TOML.encode("utf-8")


@lru_cache(maxsize=1)
def _parsed_default_document() -> ConfigDocument:
    from mangal.core.parser import parse_document

    return parse_document(default_config_bytes())


def default_document() -> ConfigDocument:
    """
    Get the parsed default configuration document.

    Every call returns its own copy, the parsed original is never handed out.

    Returns:
        ConfigDocument with every key of the default file present
    """
    return _parsed_default_document().model_copy(deep=True)


def default_config() -> "ResolvedConfig":
    """
    Assemble the default configuration.

    Returns:
        ResolvedConfig built from the default document alone
    """
    from mangal.core.assembler import assemble

    return assemble(default_document())


__all__ = [
    "DEFAULT_CHAPTER_NAME_TEMPLATE",
    "DEFAULT_UI_CHAPTER_NAME_TEMPLATE",
    "DEFAULT_CONFIG_TOML",
    "default_config_bytes",
    "default_document",
    "default_config",
]
