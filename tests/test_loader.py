from pathlib import Path

import pytest

from mangal.core import loader
from mangal.core.exceptions import ConfigurationError, ParseError
from mangal.core.loader import FallbackReason, load_config, resolve_config
from mangal.sources import registry


def test_missing_file_falls_back(tmp_path):
    result = load_config(tmp_path / "nope.toml")

    assert result.fallback_reason is FallbackReason.MISSING
    assert result.used_defaults
    assert result.config.source_names == ("manganelo",)


def test_directory_is_treated_as_missing(tmp_path):
    result = load_config(tmp_path)

    assert result.fallback_reason is FallbackReason.MISSING


def test_malformed_file_falls_back(write_config):
    path = write_config("use = ['manganelo'\nformat = ")

    result = load_config(path)

    assert result.fallback_reason is FallbackReason.MALFORMED
    assert isinstance(result.error, ParseError)
    assert result.error.config_path == str(path)
    assert result.config.format == "pdf"


def test_unreadable_file_falls_back(write_config, monkeypatch):
    path = write_config('format = "cbz"\n')

    def deny(self):
        raise PermissionError("permission denied")

    monkeypatch.setattr(Path, "read_bytes", deny)

    result = load_config(path)

    assert result.fallback_reason is FallbackReason.UNREADABLE
    assert result.config.format == "pdf"


def test_assembly_failure_falls_back(write_config):
    path = write_config('[anilist]\nenabled = true\nid = "abc"\nsecret = "x"\n')

    result = load_config(path)

    assert result.fallback_reason is FallbackReason.ASSEMBLY
    assert result.config.anilist.enabled is False


def test_valid_file_is_loaded(write_config, tmp_path):
    path = write_config('format = "cbz"\ncache_images = true\n')

    result = load_config(path, cache_root=tmp_path / "cache")

    assert not result.used_defaults
    assert result.path == path
    assert result.config.format == "cbz"
    assert result.config.sources[0].cache_dir == tmp_path / "cache" / "manganelo"


def test_empty_path_uses_platform_location(tmp_path, monkeypatch):
    monkeypatch.setattr(loader, "user_config_dir", lambda: tmp_path)
    (tmp_path / "config.toml").write_text('format = "epub"\n', encoding="utf-8")

    assert loader.config_file_location() == tmp_path / "config.toml"
    assert load_config("").config.format == "epub"
    assert load_config(None).config.format == "epub"


def test_location_failure_falls_back(monkeypatch):
    def no_home():
        raise RuntimeError("could not determine home directory")

    monkeypatch.setattr(loader, "user_config_dir", no_home)

    result = load_config()

    assert result.fallback_reason is FallbackReason.LOCATION
    assert result.path is None
    assert result.config.format == "pdf"


@pytest.mark.parametrize(
    "content",
    [None, "", "not = [valid", "format = 5", "\xff"],
)
def test_resolve_config_never_fails(tmp_path, content):
    path = tmp_path / "config.toml"
    if content is not None:
        path.write_text(content, encoding="latin-1")

    config = resolve_config(path)

    assert config is not None
    assert config.sources


def test_strict_mode_raises_parse_error(write_config):
    path = write_config("format = ")

    with pytest.raises(ParseError):
        load_config(path, strict=True)


def test_strict_mode_raises_for_missing_file(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(tmp_path / "nope.toml", strict=True)

    assert "doesn't exist" in str(exc_info.value)


def test_malformed_file_falls_back_without_a_home(write_config, monkeypatch, tmp_path):
    def no_home():
        raise RuntimeError("could not determine home directory")

    monkeypatch.setattr(registry, "user_cache_root", no_home)
    path = write_config("format = ")

    result = load_config(path, cache_root=tmp_path / "c")

    assert result.fallback_reason is FallbackReason.MALFORMED
    assert result.config.format == "pdf"


def test_cache_lookup_failure_falls_back(write_config, monkeypatch):
    def no_home():
        raise RuntimeError("could not determine home directory")

    monkeypatch.setattr(registry, "user_cache_root", no_home)
    path = write_config("cache_images = true\n")

    result = load_config(path)

    assert result.fallback_reason is FallbackReason.ASSEMBLY
    assert isinstance(result.error, RuntimeError)
    assert result.config.cache_images is False
