"""Tests for origin resolution, locale paths and canonical/alternate links."""

from urllib.parse import urlparse

import pytest

from prompthub.services.seo import (
    X_DEFAULT,
    build_links,
    delocalize,
    localize,
    resolve_base_url,
    to_absolute_url,
)

_ORIGIN = "https://prompts.example"

_LOCALE_SETS = [
    (("en",), "en"),
    (("en", "es"), "en"),
    (("de", "en", "ja"), "en"),
    (("fr", "en"), "fr"),
]

_PATHS = ["/", "/prompts", "/prompts/p1_hello", "/tags/chatgpt?page=2", "/@alice"]


class TestResolveBaseUrl:
    def test_forwarded_headers_without_override(self):
        headers = {"x-forwarded-host": "example.com", "x-forwarded-proto": "http"}
        assert resolve_base_url(None, headers) == "http://example.com"

    def test_explicit_origin_ignores_headers(self):
        headers = {"x-forwarded-host": "example.com", "x-forwarded-proto": "http"}
        assert resolve_base_url("https://prompts.example/", headers) == "https://prompts.example"

    def test_protocol_defaults_to_https(self):
        assert resolve_base_url(None, {"host": "example.org"}) == "https://example.org"

    def test_forwarded_host_wins_over_host(self):
        headers = {"X-Forwarded-Host": "public.example", "Host": "internal:8000"}
        assert resolve_base_url(None, headers) == "https://public.example"

    def test_first_value_of_forwarded_chain(self):
        headers = {"x-forwarded-host": "a.example, b.example", "x-forwarded-proto": "http, https"}
        assert resolve_base_url(None, headers) == "http://a.example"

    def test_falls_back_to_local_default(self):
        assert resolve_base_url() == "https://localhost:3000"
        assert resolve_base_url(None, {}) == "https://localhost:3000"

    def test_idempotent(self):
        headers = {"host": "example.org"}
        assert resolve_base_url(None, headers) == resolve_base_url(None, headers)


class TestLocalize:
    @pytest.mark.parametrize("path", _PATHS)
    def test_default_locale_is_noop(self, path):
        assert localize(path, "en", "en") == path

    def test_root_for_other_locale_has_no_trailing_slash(self):
        assert localize("/", "es", "en") == "/es"

    def test_prefixes_other_locales(self):
        assert localize("/prompts", "es", "en") == "/es/prompts"

    def test_keeps_query_string(self):
        assert localize("/tags/x?page=2", "fr", "en") == "/fr/tags/x?page=2"
        assert localize("/?page=2", "fr", "en") == "/fr?page=2"

    @pytest.mark.parametrize("url", ["https://cdn.example/a.png", "HTTP://cdn.example/b"])
    def test_absolute_urls_pass_through(self, url):
        assert localize(url, "es", "en") == url

    @pytest.mark.parametrize("path", _PATHS + ["/?page=2"])
    @pytest.mark.parametrize("locale", ["en", "es", "pt-BR"])
    def test_round_trip(self, path, locale):
        assert delocalize(localize(path, locale, "en"), locale, "en") == path


class TestBuildLinks:
    @pytest.mark.parametrize("locales,default", _LOCALE_SETS)
    @pytest.mark.parametrize("path", _PATHS)
    def test_one_entry_per_locale_plus_x_default(self, locales, default, path):
        links = build_links(_ORIGIN, path, locales, default)

        assert set(links.alternates) == set(locales) | {X_DEFAULT}
        assert len(links.alternates) == len(locales) + 1
        for url in links.alternates.values():
            parsed = urlparse(url)
            assert f"{parsed.scheme}://{parsed.netloc}" == _ORIGIN

    def test_alternate_urls(self):
        links = build_links(_ORIGIN, "/prompts", ("en", "es"), "en", active_locale="es")

        assert links.alternates == {
            "en": "https://prompts.example/prompts",
            "es": "https://prompts.example/es/prompts",
            X_DEFAULT: "https://prompts.example/prompts",
        }
        assert links.canonical == "https://prompts.example/es/prompts"

    def test_root_path(self):
        links = build_links(_ORIGIN, "/", ("en", "es"), "en")

        assert links.canonical == "https://prompts.example/"
        assert links.alternates["es"] == "https://prompts.example/es"
        assert links.alternates[X_DEFAULT] == "https://prompts.example/"

    def test_x_default_is_unprefixed_even_when_default_is_not_first(self):
        links = build_links(_ORIGIN, "/discover", ("fr", "en"), "fr")
        assert links.alternates[X_DEFAULT] == "https://prompts.example/discover"
        assert links.alternates["en"] == "https://prompts.example/en/discover"

    def test_query_string_on_every_url(self):
        links = build_links(_ORIGIN, "/tags/chatgpt?page=2", ("en", "es"), "en", "es")
        assert all(url.endswith("?page=2") for url in links.alternates.values())
        assert links.canonical == "https://prompts.example/es/tags/chatgpt?page=2"

    def test_unknown_active_locale_falls_back_to_unprefixed(self):
        links = build_links(_ORIGIN, "/prompts", ("en", "es"), "en", active_locale="de")
        assert links.canonical == "https://prompts.example/prompts"

    def test_deterministic(self):
        first = build_links(_ORIGIN, "/prompts", ("en", "es"), "en", "es")
        second = build_links(_ORIGIN, "/prompts", ("en", "es"), "en", "es")
        assert first == second

    def test_double_slash_path_stays_on_origin(self):
        links = build_links(_ORIGIN, "//evil.example/x", ("en", "es", "fr"), "en")

        assert links.canonical == "https://prompts.example/evil.example/x"
        assert links.alternates == {
            "en": "https://prompts.example/evil.example/x",
            "es": "https://prompts.example/es/evil.example/x",
            "fr": "https://prompts.example/fr/evil.example/x",
            X_DEFAULT: "https://prompts.example/evil.example/x",
        }

    def test_dot_segments_are_kept(self):
        links = build_links(_ORIGIN, "/tags/..", ("en", "es"), "en")

        assert links.canonical == "https://prompts.example/tags/.."
        assert links.alternates["es"] == "https://prompts.example/es/tags/.."


def test_to_absolute_url():
    assert to_absolute_url(_ORIGIN, "logo.svg") == "https://prompts.example/logo.svg"
    assert to_absolute_url(_ORIGIN, "https://cdn.example/x.png") == "https://cdn.example/x.png"
    assert to_absolute_url(_ORIGIN, None) is None
    assert to_absolute_url(_ORIGIN, "//cdn.example/x.png") == "https://prompts.example/cdn.example/x.png"
    assert to_absolute_url(_ORIGIN, "/") == "https://prompts.example/"
