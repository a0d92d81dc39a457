"""
Source Adapter - Handle for one scrapeable manga site.

The adapter carries the typed settings of a ``[sources.<name>]`` section
and the location of its image cache. Scraping itself lives outside the
configuration core; here an adapter only exposes its name, its settings
and a structural self-check.
"""

import logging
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from mangal.core.config_schemas import SourceSpec
from mangal.core.exceptions import SourceError


logger = logging.getLogger(__name__)


REQUIRED_SELECTORS = (
    "manga_anchor",
    "manga_title",
    "chapter_anchor",
    "chapter_title",
    "reader_page",
)


class SourceAdapter:
    """
    A configured manga source.

    ``cache_dir`` is None when image caching is disabled.
    """

    def __init__(self, spec: SourceSpec, cache_dir: Optional[Path] = None):
        """
        Initialize the adapter.

        Args:
            spec: Settings of the source section
            cache_dir: Directory for cached images, None to disable caching
        """
        self.spec = spec
        self.cache_dir = cache_dir
        self.logger = logging.getLogger(f"{__name__}.{spec.name}")

    @property
    def name(self) -> str:
        return self.spec.name

    def validate(self) -> None:
        """
        Check that the source settings are usable.

        Raises:
            SourceError: Describing the first problem found
        """
        spec = self.spec

        if not spec.base:
            raise SourceError(f"source '{spec.name}': base url is not set", source_name=spec.name)

        if not _is_http_url(spec.base):
            raise SourceError(
                f"source '{spec.name}': base url '{spec.base}' is not a valid http(s) url",
                source_name=spec.name,
            )

        if spec.chapters_base and not _is_http_url(spec.chapters_base):
            raise SourceError(
                f"source '{spec.name}': chapters base url '{spec.chapters_base}' is not a valid http(s) url",
                source_name=spec.name,
            )

        if not spec.search:
            raise SourceError(f"source '{spec.name}': search url is not set", source_name=spec.name)

        if "%s" not in spec.search:
            raise SourceError(
                f"source '{spec.name}': search url should contain %s placeholder for the query",
                source_name=spec.name,
            )

        for selector in REQUIRED_SELECTORS:
            if not getattr(spec, selector):
                raise SourceError(
                    f"source '{spec.name}': {selector} selector is not set",
                    source_name=spec.name,
                )

        if spec.random_delay_ms < 0:
            raise SourceError(
                f"source '{spec.name}': random_delay_ms should not be negative",
                source_name=spec.name,
            )

    def __repr__(self) -> str:
        return f"SourceAdapter(name={self.name!r}, cache_dir={self.cache_dir!r})"


def _is_http_url(url: str) -> bool:
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


__all__ = [
    "REQUIRED_SELECTORS",
    "SourceAdapter",
]
