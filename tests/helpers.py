def source_section(name: str, **overrides) -> str:
    """TOML text of a complete, valid source section."""
    settings = {
        "base": f"'https://{name}.example.com'",
        "search": f"'https://{name}.example.com/search/%s'",
        "manga_anchor": "'a.manga'",
        "manga_title": "'a.manga'",
        "chapter_anchor": "'a.chapter'",
        "chapter_title": "'a.chapter'",
        "reader_page": "'img.page'",
        "random_delay_ms": "100",
    }
    settings.update(overrides)
    lines = [f"[sources.{name}]"] + [f"{key} = {value}" for key, value in settings.items()]
    return "\n".join(lines) + "\n"
