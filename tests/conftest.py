from pathlib import Path

import pytest

from mangal.core.assembler import assemble
from mangal.core.parser import parse_document


@pytest.fixture
def cache_root(tmp_path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def config_dir(tmp_path) -> Path:
    return tmp_path / "config"


@pytest.fixture
def build_config(cache_root, config_dir):
    """Parse and assemble TOML text the way a user file would be."""

    def _build(text: str, **kwargs):
        document = parse_document(text.encode("utf-8"))
        return assemble(document, cache_root=cache_root, config_dir=config_dir, **kwargs)

    return _build


@pytest.fixture
def write_config(tmp_path):
    def _write(text: str, name: str = "config.toml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
