"""
Configuration Schemas - Pydantic models for the raw configuration document.

These models mirror the section/key layout of ``config.toml``. They hold
values as written by the user: nothing is defaulted beyond zero values and
no business rules are enforced here. Values must already carry the TOML
type of their key, nothing is coerced. Unknown keys are ignored. The set of
keys that were actually present is available through ``model_fields_set``.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SourceSpec(BaseModel):
    """Settings of a single ``[sources.<name>]`` section."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    name: str = Field(default="", description="Source name, taken from the section key")
    base: str = Field(default="", description="Base url of the site")
    chapters_base: str = Field(default="", description="Base url of chapter pages")
    search: str = Field(default="", description="Search endpoint, %s is replaced with the query")
    manga_anchor: str = Field(default="", description="Selector of entry anchors on the search page")
    manga_title: str = Field(default="", description="Selector of entry titles on the search page")
    chapter_anchor: str = Field(default="", description="Selector of chapter anchors")
    chapter_title: str = Field(default="", description="Selector of chapter titles")
    reader_page: str = Field(default="", description="Selector of reader page images")
    random_delay_ms: int = Field(default=0, description="Random delay between requests in ms")
    reversed_chapters_order: bool = Field(
        default=False,
        description="Whether chapters are listed from newest to oldest"
    )
    whitespace_escape: str = Field(
        default="",
        description="Character that replaces whitespace in search queries"
    )


class UISection(BaseModel):
    """The ``[ui]`` section."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    chapter_name_template: str = ""
    fullscreen: bool = False
    prompt: str = ""
    placeholder: str = ""
    mark: str = ""
    title: str = ""


class AnilistSection(BaseModel):
    """The ``[anilist]`` section."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    enabled: bool = False
    id: str = ""
    secret: str = ""
    mark_downloaded: bool = False


class ConfigDocument(BaseModel):
    """Intermediate representation of ``config.toml``, typed but not validated."""

    model_config = ConfigDict(extra="ignore", strict=True, frozen=True)

    use: List[str] = Field(default_factory=list, description="Names of enabled sources")
    format: str = Field(default="", description="Output format")
    use_custom_reader: bool = False
    custom_reader: str = ""
    download_path: str = ""
    chapter_name_template: str = ""
    cache_images: bool = False
    anilist: AnilistSection = Field(default_factory=AnilistSection)
    ui: UISection = Field(default_factory=UISection)
    sources: Dict[str, SourceSpec] = Field(
        default_factory=dict,
        description="Declared source sections by name"
    )

    @model_validator(mode="before")
    @classmethod
    def name_source_sections(cls, data: Any) -> Any:
        """Give every source section the name of its key."""
        if not isinstance(data, dict) or not isinstance(data.get("sources"), dict):
            return data

        sources = {
            name: {**section, "name": name} if isinstance(section, dict) else section
            for name, section in data["sources"].items()
        }
        return {**data, "sources": sources}


__all__ = [
    "SourceSpec",
    "UISection",
    "AnilistSection",
    "ConfigDocument",
]
