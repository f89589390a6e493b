"""schema.org JSON-LD for listing pages."""

from datetime import datetime
from typing import Any

from prompthub.config import SiteConfig
from prompthub.repositories.postgres import PromptListing
from prompthub.services.seo import build_localized_url, to_absolute_url
from prompthub.services.urls import prompt_path, user_path

DEFAULT_LOGO = "/logo.svg"


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def _drop_none(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def organization(site: SiteConfig, origin: str) -> dict[str, Any]:
    return _drop_none(
        {
            "@type": "Organization",
            "name": site.branding.name,
            "url": origin,
            "description": site.branding.description,
            "logo": to_absolute_url(origin, site.branding.logo or DEFAULT_LOGO),
        }
    )


def breadcrumbs(site: SiteConfig, origin: str, locale: str, title: str, path: str) -> dict[str, Any]:
    return {
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": 1,
                "name": site.branding.name,
                "item": origin,
            },
            {
                "@type": "ListItem",
                "position": 2,
                "name": title,
                "item": build_localized_url(origin, path, locale, site.default_locale),
            },
        ],
    }


def creative_work(site: SiteConfig, origin: str, locale: str, listing: PromptListing) -> dict[str, Any]:
    """Describe one prompt; modification date falls back to creation date."""
    prompt = listing.prompt
    author = prompt.author
    return _drop_none(
        {
            "@type": "CreativeWork",
            "name": prompt.title,
            "description": prompt.description or None,
            "url": build_localized_url(
                origin, prompt_path(prompt.id, prompt.slug), locale, site.default_locale
            ),
            "author": {
                "@type": "Person",
                "name": author.name or author.username,
                "url": build_localized_url(
                    origin, user_path(author.username), locale, site.default_locale
                ),
            },
            "inLanguage": locale,
            "datePublished": _iso(prompt.created_at),
            "dateModified": _iso(prompt.updated_at or prompt.created_at),
        }
    )


def build_listing_graph(
    site: SiteConfig,
    origin: str,
    locale: str,
    *,
    title: str,
    path: str,
    listings: list[PromptListing],
) -> dict[str, Any]:
    """Organization, breadcrumb trail and one CreativeWork per listed prompt."""
    return {
        "@context": "https://schema.org",
        "@graph": [
            organization(site, origin),
            breadcrumbs(site, origin, locale, title, path),
            *(creative_work(site, origin, locale, listing) for listing in listings),
        ],
    }
