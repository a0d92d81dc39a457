"""
Config Assembler - Builds a ResolvedConfig from a parsed document.

Every key missing from the document takes the value of the default
document. A few keys also treat an empty value as missing, and
``cache_images`` is always taken as written because ``false`` is a
meaningful choice there.
"""

import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel

from mangal.anilist.client import TOKEN_FILE_NAME, AnilistClient
from mangal.core.config_defaults import (
    DEFAULT_CHAPTER_NAME_TEMPLATE,
    DEFAULT_UI_CHAPTER_NAME_TEMPLATE,
    default_document,
)
from mangal.core.config_schemas import ConfigDocument, SourceSpec
from mangal.core.formats import DEFAULT_FORMAT
from mangal.core.models import AnilistOptions, ResolvedConfig, UIOptions
from mangal.core.paths import user_config_dir
from mangal.sources.registry import resolve_sources


logger = logging.getLogger(__name__)


ClientFactory = Callable[[str, str, Optional[Path]], AnilistClient]


def _pick(section: BaseModel, fallback: BaseModel, field: str) -> Any:
    """Take a field from ``section`` if it was written, else from ``fallback``."""
    if field in section.model_fields_set:
        return getattr(section, field)
    return getattr(fallback, field)


def _merge_sources(
    sections: Dict[str, SourceSpec],
    fallback: Dict[str, SourceSpec],
) -> Dict[str, SourceSpec]:
    """Overlay user source sections on the default ones, key by key."""
    merged = dict(fallback)
    for name, spec in sections.items():
        base = fallback.get(name)
        if base is None:
            merged[name] = spec
        else:
            written = {field: getattr(spec, field) for field in spec.model_fields_set}
            merged[name] = base.model_copy(update={**written, "name": name})
    return merged


def assemble(
    document: ConfigDocument,
    defaults: Optional[ConfigDocument] = None,
    *,
    cache_root: Optional[Path] = None,
    config_dir: Optional[Path] = None,
    client_factory: ClientFactory = AnilistClient.create,
) -> ResolvedConfig:
    """
    Assemble the final configuration.

    Args:
        document: Parsed user document
        defaults: Document supplying missing values (the default document if None)
        cache_root: Root of the per-user cache (platform default if None)
        config_dir: Directory holding the Anilist token (platform default if None)
        client_factory: Builds the Anilist client when the integration is enabled

    Returns:
        Assembled, not yet validated configuration

    Raises:
        AnilistError: If the Anilist client cannot be constructed
    """
    if defaults is None:
        defaults = default_document()

    # false is a real choice for cache_images, never substituted
    cache_images = document.cache_images

    sections = _merge_sources(document.sources, defaults.sources)
    sources = resolve_sources(
        sections,
        _pick(document, defaults, "use"),
        cache_images,
        cache_root=cache_root,
    )

    ui = UIOptions(
        chapter_name_template=(
            _pick(document.ui, defaults.ui, "chapter_name_template") or DEFAULT_UI_CHAPTER_NAME_TEMPLATE
        ),
        fullscreen=_pick(document.ui, defaults.ui, "fullscreen"),
        prompt=_pick(document.ui, defaults.ui, "prompt"),
        placeholder=_pick(document.ui, defaults.ui, "placeholder"),
        mark=_pick(document.ui, defaults.ui, "mark"),
        title=_pick(document.ui, defaults.ui, "title"),
    )

    anilist = AnilistOptions()
    if _pick(document.anilist, defaults.anilist, "enabled"):
        client_id = _pick(document.anilist, defaults.anilist, "id")
        client_secret = _pick(document.anilist, defaults.anilist, "secret")
        # token lives in the config dir, cleanup only removes the cache
        token_file = (config_dir or user_config_dir()) / TOKEN_FILE_NAME
        client = client_factory(client_id, client_secret, token_file)
        logger.debug("Anilist integration enabled, client constructed")

        anilist = AnilistOptions(
            enabled=True,
            client_id=client_id,
            client_secret=client_secret,
            mark_downloaded=_pick(document.anilist, defaults.anilist, "mark_downloaded"),
            client=client,
        )

    config = ResolvedConfig(
        sources=tuple(sources),
        format=_pick(document, defaults, "format") or DEFAULT_FORMAT.value,
        ui=ui,
        anilist=anilist,
        use_custom_reader=_pick(document, defaults, "use_custom_reader"),
        custom_reader=_pick(document, defaults, "custom_reader"),
        download_path=_pick(document, defaults, "download_path"),
        cache_images=cache_images,
        chapter_name_template=(
            _pick(document, defaults, "chapter_name_template") or DEFAULT_CHAPTER_NAME_TEMPLATE
        ),
    )

    logger.debug(f"Assembled configuration with sources {list(config.source_names)}")
    return config


__all__ = [
    "ClientFactory",
    "assemble",
]
