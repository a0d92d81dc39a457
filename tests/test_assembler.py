import pytest

from mangal.anilist.client import TOKEN_FILE_NAME, AnilistClient
from mangal.core import assembler
from mangal.core.assembler import assemble
from mangal.core.config_defaults import default_config, default_document
from mangal.core.exceptions import AnilistError
from mangal.core.parser import parse_document
from mangal.sources import registry

from tests.helpers import source_section


def test_empty_document_matches_defaults(build_config):
    config = build_config("")
    defaults = default_config()

    assert config.source_names == ("manganelo",)
    assert config.format == defaults.format == "pdf"
    assert config.use_custom_reader is False
    assert config.custom_reader == "zathura"
    assert config.download_path == "."
    assert config.chapter_name_template == "[%0d] %s"
    assert config.cache_images is False
    assert config.ui == defaults.ui
    assert config.anilist.enabled is False
    assert config.anilist.client is None


def test_missing_fields_take_default_values(build_config):
    config = build_config('format = "cbz"\n[ui]\nprompt = "$"\n')

    assert config.format == "cbz"
    assert config.ui.prompt == "$"
    assert config.ui.placeholder == "What shall we look for?"
    assert config.ui.title == "Mangal"
    assert config.ui.fullscreen is True
    assert config.custom_reader == "zathura"


def test_empty_strings_use_builtin_fallbacks(build_config):
    config = build_config(
        'format = ""\nchapter_name_template = ""\n[ui]\nchapter_name_template = ""\n'
    )

    assert config.format == "pdf"
    assert config.chapter_name_template == "[%0d] %s"
    assert config.ui.chapter_name_template == "[%d] %s"


def test_written_false_is_kept(build_config):
    config = build_config("[ui]\nfullscreen = false\n")

    assert config.ui.fullscreen is False


def test_written_empty_reader_is_kept(build_config):
    config = build_config('use_custom_reader = true\ncustom_reader = ""\n')

    assert config.use_custom_reader is True
    assert config.custom_reader == ""


def test_cache_images_controls_adapter_cache(build_config, cache_root):
    cached = build_config("cache_images = true\n")
    uncached = build_config("cache_images = false\n")

    assert cached.cache_images is True
    assert cached.sources[0].cache_dir == cache_root / "manganelo"
    assert uncached.sources[0].cache_dir is None


def test_enabled_order_wins_over_declaration_order(build_config):
    config = build_config("use = ['b', 'a', 'missing']\n" + source_section("a") + source_section("b"))

    assert config.source_names == ("b", "a")


def test_user_source_section_overlays_default(build_config):
    config = build_config("[sources.manganelo]\nrandom_delay_ms = 100\n")

    spec = config.sources[0].spec
    assert spec.random_delay_ms == 100
    assert spec.base == "https://m.manganelo.com"
    assert spec.name == "manganelo"


def test_anilist_client_built_when_enabled(build_config, config_dir):
    calls = []

    def factory(client_id, client_secret, token_file):
        calls.append((client_id, client_secret, token_file))
        return AnilistClient(client_id, client_secret)

    config = build_config(
        '[anilist]\nenabled = true\nid = "123"\nsecret = "s3cret"\nmark_downloaded = true\n',
        client_factory=factory,
    )

    assert calls == [("123", "s3cret", config_dir / TOKEN_FILE_NAME)]
    assert config.anilist.enabled is True
    assert config.anilist.client_id == "123"
    assert config.anilist.mark_downloaded is True
    assert config.anilist.client.id == "123"


def test_anilist_disabled_builds_nothing(build_config):
    def factory(client_id, client_secret, token_file):
        raise AssertionError("client should not be constructed")

    config = build_config(
        '[anilist]\nenabled = false\nid = "123"\nsecret = "x"\nmark_downloaded = true\n',
        client_factory=factory,
    )

    assert config.anilist.enabled is False
    assert config.anilist.client is None
    assert config.anilist.client_id == ""
    assert config.anilist.mark_downloaded is False


def test_anilist_construction_failure_aborts(build_config):
    with pytest.raises(AnilistError):
        build_config('[anilist]\nenabled = true\nid = "not-a-number"\nsecret = "x"\n')


def test_resolved_config_is_frozen(build_config):
    config = build_config("")

    with pytest.raises(Exception):
        config.format = "cbz"


def test_source_specs_are_frozen(build_config):
    config = build_config("")

    with pytest.raises(Exception):
        config.sources[0].spec.base = "https://elsewhere.example.com"


def test_default_document_is_not_shared():
    first = default_document()
    first.use.append("ghost")

    second = default_document()

    assert second.use == ["manganelo"]
    assert default_config().source_names == ("manganelo",)
    assert default_config().sources[0].spec.base == "https://m.manganelo.com"


def test_anilist_token_lives_outside_the_cache(cache_root, monkeypatch, tmp_path):
    monkeypatch.setattr(assembler, "user_config_dir", lambda: tmp_path / "config")
    token_files = []

    def factory(client_id, client_secret, token_file):
        token_files.append(token_file)
        return AnilistClient(client_id, client_secret)

    document = parse_document(b'[anilist]\nenabled = true\nid = "1"\nsecret = "s"\n')
    assemble(document, cache_root=cache_root, client_factory=factory)

    assert token_files == [tmp_path / "config" / TOKEN_FILE_NAME]
    assert cache_root not in token_files[0].parents


def test_cache_root_not_looked_up_without_caching(monkeypatch):
    def no_home():
        raise RuntimeError("could not determine home directory")

    monkeypatch.setattr(registry, "user_cache_root", no_home)

    config = assemble(parse_document(b"cache_images = false\n"))

    assert config.sources[0].cache_dir is None
