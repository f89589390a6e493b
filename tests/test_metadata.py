"""Tests for localized page metadata."""

from prompthub.services.metadata import OpenGraphImage, build_metadata


def test_canonical_and_alternates_for_active_locale(site, origin):
    meta = build_metadata(site, origin, "es", title="Prompts", description="All prompts", path="/prompts")

    assert meta.canonical == "https://prompts.example/es/prompts"
    assert meta.alternates == {
        "en": "https://prompts.example/prompts",
        "es": "https://prompts.example/es/prompts",
        "fr": "https://prompts.example/fr/prompts",
        "x-default": "https://prompts.example/prompts",
    }
    assert meta.locale == "es"
    assert meta.site_name == "Prompt Hub"


def test_path_defaults_to_root(site, origin):
    meta = build_metadata(site, origin, "en", title="Home", description="Welcome")
    assert meta.canonical == "https://prompts.example/"


def test_default_image_is_placeholder(site, origin):
    meta = build_metadata(site, origin, "en", title="T", description="D", path="/discover")
    assert meta.images == [
        OpenGraphImage(url="https://prompts.example/og.png", width=1200, height=630)
    ]


def test_string_image(site, origin):
    meta = build_metadata(
        site, origin, "en", title="T", description="D", image="https://cdn.example/card.png"
    )
    assert meta.images == [OpenGraphImage(url="https://cdn.example/card.png")]


def test_image_with_dimensions(site, origin):
    meta = build_metadata(
        site,
        origin,
        "en",
        title="T",
        description="D",
        image={"url": "/images/p1.png", "width": 800, "height": 400},
    )
    assert meta.images == [
        OpenGraphImage(url="https://prompts.example/images/p1.png", width=800, height=400)
    ]


def test_to_dict_shares_images_between_consumers(site, origin):
    data = build_metadata(
        site, origin, "fr", title="Découvrir", description="D", path="/discover"
    ).to_dict()

    assert data["alternates"]["canonical"] == "https://prompts.example/fr/discover"
    assert data["alternates"]["languages"]["x-default"] == "https://prompts.example/discover"
    assert data["open_graph"]["url"] == data["alternates"]["canonical"]
    assert data["open_graph"]["site_name"] == "Prompt Hub"
    assert data["open_graph"]["images"] == [
        {"url": "https://prompts.example/og.png", "width": 1200, "height": 630}
    ]
    assert data["twitter"]["card"] == "summary_large_image"
    assert data["twitter"]["images"] == ["https://prompts.example/og.png"]
