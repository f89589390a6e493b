"""Tests for settings validation and the site snapshot."""

import pytest
from pydantic import ValidationError

from prompthub.config import Settings
from prompthub.services.robots import build_robots_txt


def test_default_locale_must_be_configured():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, locales=["en", "es"], default_locale="fr")


def test_locales_must_not_be_empty():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, locales=[], default_locale="en")


def test_site_snapshot():
    settings = Settings(
        _env_file=None,
        locales=["es", "en"],
        default_locale="es",
        feature_tags=False,
        site_name="Prompteca",
    )
    site = settings.site

    assert site.locales == ("es", "en")
    assert site.default_locale == "es"
    assert site.features.tags is False
    assert site.features.categories is True
    assert site.branding.name == "Prompteca"


def test_explicit_origin_prefers_app_url():
    settings = Settings(_env_file=None, app_url="https://a.example", nextauth_url="https://b.example")
    assert settings.explicit_origin == "https://a.example"
    assert Settings(_env_file=None, app_url=None, nextauth_url="https://b.example").explicit_origin == (
        "https://b.example"
    )


def test_semantic_search_needs_api_key():
    assert Settings(_env_file=None, ai_search_enabled=True, openai_api_key=None).semantic_search_available is False
    assert Settings(
        _env_file=None, ai_search_enabled=True, openai_api_key="sk-test"
    ).semantic_search_available is True


def test_robots_sitemap_reference():
    body = build_robots_txt("https://prompts.example")
    assert body.endswith("Sitemap: https://prompts.example/sitemap.xml\n")
