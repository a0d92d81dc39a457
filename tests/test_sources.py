import pytest

from mangal.core.config_schemas import SourceSpec
from mangal.core.exceptions import SourceError
from mangal.sources.base import SourceAdapter
from mangal.sources.registry import resolve_sources


def _spec(name: str, **overrides) -> SourceSpec:
    settings = dict(
        name=name,
        base=f"https://{name}.example.com",
        search=f"https://{name}.example.com/search/%s",
        manga_anchor="a.manga",
        manga_title="a.manga",
        chapter_anchor="a.chapter",
        chapter_title="a.chapter",
        reader_page="img.page",
    )
    settings.update(overrides)
    return SourceSpec(**settings)


def test_resolution_follows_use_order(tmp_path):
    sections = {"a": _spec("a"), "b": _spec("b")}

    adapters = resolve_sources(sections, ["b", "a"], cache_images=False, cache_root=tmp_path)

    assert [adapter.name for adapter in adapters] == ["b", "a"]


def test_unknown_names_are_dropped(tmp_path):
    sections = {"a": _spec("a")}

    adapters = resolve_sources(sections, ["nope", "a"], cache_images=False, cache_root=tmp_path)

    assert [adapter.name for adapter in adapters] == ["a"]


def test_duplicate_names_resolve_once(tmp_path):
    sections = {"a": _spec("a"), "b": _spec("b")}

    adapters = resolve_sources(sections, ["a", "b", "a"], cache_images=False, cache_root=tmp_path)

    assert [adapter.name for adapter in adapters] == ["a", "b"]


def test_cache_dir_only_when_caching(tmp_path):
    sections = {"a": _spec("a")}

    cached = resolve_sources(sections, ["a"], cache_images=True, cache_root=tmp_path)
    uncached = resolve_sources(sections, ["a"], cache_images=False, cache_root=tmp_path)

    assert cached[0].cache_dir == tmp_path / "a"
    assert uncached[0].cache_dir is None


def test_valid_source_passes_self_check():
    SourceAdapter(_spec("a")).validate()


@pytest.mark.parametrize(
    "overrides, expected",
    [
        ({"base": ""}, "base url is not set"),
        ({"base": "ftp://a.example.com"}, "not a valid http(s) url"),
        ({"chapters_base": "not a url"}, "chapters base url"),
        ({"search": ""}, "search url is not set"),
        ({"search": "https://a.example.com/search"}, "%s placeholder"),
        ({"reader_page": ""}, "reader_page selector is not set"),
        ({"random_delay_ms": -1}, "random_delay_ms"),
    ],
)
def test_invalid_source_fails_self_check(overrides, expected):
    adapter = SourceAdapter(_spec("a", **overrides))

    with pytest.raises(SourceError) as exc_info:
        adapter.validate()

    assert expected in str(exc_info.value)
    assert exc_info.value.source_name == "a"
