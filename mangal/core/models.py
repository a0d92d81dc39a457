"""
Resolved Configuration Models - The final, immutable configuration.

A ResolvedConfig is built once at startup and handed to every component
that needs it. All models are frozen; validation is a separate step
(see ``mangal.core.validator``).
"""

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from mangal.anilist.client import AnilistClient
from mangal.sources.base import SourceAdapter


class UIOptions(BaseModel):
    """Terminal UI settings."""

    model_config = ConfigDict(frozen=True)

    chapter_name_template: str = Field(..., description="How chapters are displayed")
    fullscreen: bool = Field(..., description="Run the UI in the alternate screen")
    prompt: str = Field(..., description="Input prompt symbol")
    placeholder: str = Field(..., description="Input placeholder")
    mark: str = Field(..., description="Selected chapter mark")
    title: str = Field(..., description="Search window title")


class AnilistOptions(BaseModel):
    """Anilist integration settings and the constructed client."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    enabled: bool = False
    client_id: str = ""
    client_secret: str = ""
    mark_downloaded: bool = False
    client: Optional[AnilistClient] = None


class ResolvedConfig(BaseModel):
    """Fully assembled application configuration."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    sources: Tuple[SourceAdapter, ...] = Field(..., description="Active sources in use order")
    format: str = Field(..., description="Output format name")
    ui: UIOptions
    anilist: AnilistOptions = Field(default_factory=AnilistOptions)
    use_custom_reader: bool = False
    custom_reader: str = ""
    download_path: str = "."
    cache_images: bool = False
    chapter_name_template: str = Field(..., description="How downloaded chapters are named")

    @property
    def source_names(self) -> Tuple[str, ...]:
        return tuple(source.name for source in self.sources)


__all__ = [
    "UIOptions",
    "AnilistOptions",
    "ResolvedConfig",
]
