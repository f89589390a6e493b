"""Sitemap generation service."""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from xml.etree import ElementTree

from prompthub.config import SiteConfig
from prompthub.repositories.catalog import PromptCatalog
from prompthub.services.seo import build_links
from prompthub.services.urls import category_path, prompt_path, tag_path, user_path

logger = logging.getLogger(__name__)

# XML namespaces used in sitemaps
NAMESPACES = {
    "sm": "http://www.sitemaps.org/schemas/sitemap/0.9",
    "xhtml": "http://www.w3.org/1999/xhtml",
}


@dataclass
class SitemapEntry:
    """One ``<url>`` of the sitemap."""
    url: str
    last_modified: datetime | None = None
    alternates: dict[str, str] = field(default_factory=dict)


def static_routes(site: SiteConfig) -> list[str]:
    """Top-level routes, with taxonomy listings gated by feature flags."""
    routes = ["/", "/prompts"]
    if site.features.categories:
        routes.append("/categories")
    if site.features.tags:
        routes.append("/tags")
    routes.extend(["/discover", "/promptmasters", "/brand", "/privacy", "/terms"])
    return routes


async def _nothing() -> list:
    return []


def build_entry(
    site: SiteConfig,
    origin: str,
    path: str,
    last_modified: datetime | None = None,
) -> SitemapEntry:
    """Build a sitemap entry whose canonical URL is the default-locale URL."""
    links = build_links(origin, path, site.locales, site.default_locale)
    return SitemapEntry(
        url=links.canonical,
        last_modified=last_modified,
        alternates=links.alternates,
    )


async def build_sitemap(
    site: SiteConfig,
    origin: str,
    catalog: PromptCatalog,
) -> list[SitemapEntry]:
    """Enumerate every publicly indexable page.

    Order is static routes, prompts, categories, tags, then users. Within
    each group the catalog's order is kept.
    """
    prompts, categories, tags, users = await asyncio.gather(
        catalog.list_public_prompts(),
        catalog.list_categories() if site.features.categories else _nothing(),
        catalog.list_tags() if site.features.tags else _nothing(),
        catalog.list_users_with_public_prompts(),
    )

    entries = [build_entry(site, origin, route) for route in static_routes(site)]
    entries.extend(
        build_entry(site, origin, prompt_path(prompt.id, prompt.slug), prompt.updated_at)
        for prompt in prompts
    )
    entries.extend(build_entry(site, origin, category_path(c.slug)) for c in categories)
    entries.extend(build_entry(site, origin, tag_path(t.slug)) for t in tags)
    entries.extend(
        build_entry(site, origin, user_path(user.username), user.updated_at)
        for user in users
    )

    logger.info(
        "Built sitemap with %d entries (%d prompts, %d users)",
        len(entries),
        len(prompts),
        len(users),
    )
    return entries


def format_lastmod(value: datetime) -> str:
    """Format a timestamp as a W3C datetime in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat(timespec="seconds")


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    """Serialize entries as a sitemaps.org ``urlset`` with hreflang links."""
    urlset = ElementTree.Element(
        "urlset",
        {"xmlns": NAMESPACES["sm"], "xmlns:xhtml": NAMESPACES["xhtml"]},
    )
    for entry in entries:
        url = ElementTree.SubElement(urlset, "url")
        ElementTree.SubElement(url, "loc").text = entry.url
        for hreflang, href in entry.alternates.items():
            ElementTree.SubElement(
                url,
                "xhtml:link",
                {"rel": "alternate", "hreflang": hreflang, "href": href},
            )
        if entry.last_modified is not None:
            ElementTree.SubElement(url, "lastmod").text = format_lastmod(entry.last_modified)

    body = ElementTree.tostring(urlset, encoding="unicode")
    return f'<?xml version="1.0" encoding="UTF-8"?>\n{body}'
