"""
Source Registry - Turns the enabled source names into adapters.

Sources are additive and not needed to start the application, so a name
in ``use`` without a matching section is skipped rather than treated as
fatal. The resulting order follows ``use``, not the order the sections
are declared in.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from mangal.core.config_schemas import SourceSpec
from mangal.core.paths import user_cache_root
from mangal.sources.base import SourceAdapter


logger = logging.getLogger(__name__)


def resolve_sources(
    sections: Dict[str, SourceSpec],
    use: Sequence[str],
    cache_images: bool,
    cache_root: Optional[Path] = None,
) -> List[SourceAdapter]:
    """
    Build adapters for the enabled sources.

    Args:
        sections: Declared source sections by name
        use: Enabled source names, in the order they should be used
        cache_images: Whether adapters may cache images on disk
        cache_root: Root of the per-user cache (platform default if None and
            caching is on)

    Returns:
        Adapters in ``use`` order, one per distinct resolvable name
    """
    if cache_images and cache_root is None:
        cache_root = user_cache_root()

    adapters: List[SourceAdapter] = []
    resolved = set()

    for name in use:
        if name in resolved:
            logger.debug(f"Source '{name}' listed more than once, keeping the first entry")
            continue

        spec = sections.get(name)
        if spec is None:
            logger.warning(f"Source '{name}' is enabled but has no [sources.{name}] section, skipping")
            continue

        cache_dir = cache_root / name if cache_images else None
        adapters.append(SourceAdapter(spec, cache_dir=cache_dir))
        resolved.add(name)

    logger.debug(f"Resolved {len(adapters)} of {len(use)} enabled sources")
    return adapters


__all__ = ["resolve_sources"]
