"""Business logic services."""

from prompthub.services.feed import build_feed
from prompthub.services.metadata import PageMetadata, build_metadata
from prompthub.services.robots import build_robots_txt
from prompthub.services.search import KeywordSearch, SemanticSearch, search_prompts
from prompthub.services.seo import build_links, localize, resolve_base_url
from prompthub.services.sitemap import SitemapEntry, build_sitemap, render_sitemap_xml

__all__ = [
    "build_feed",
    "build_links",
    "build_metadata",
    "build_robots_txt",
    "build_sitemap",
    "localize",
    "render_sitemap_xml",
    "resolve_base_url",
    "search_prompts",
    "KeywordSearch",
    "PageMetadata",
    "SemanticSearch",
    "SitemapEntry",
]
