"""RSS 2.0 feed of the newest public prompts."""

import logging
import re
from datetime import datetime, timezone
from email.utils import format_datetime
from xml.sax.saxutils import escape

from prompthub.config import SiteConfig
from prompthub.models import Prompt
from prompthub.repositories.catalog import PromptCatalog
from prompthub.services.seo import to_absolute_url
from prompthub.services.urls import prompt_path

logger = logging.getLogger(__name__)

MAX_FEED_ITEMS = 50
FEED_PATH = "/feed.xml"
FEED_MEDIA_TYPE = "application/rss+xml; charset=utf-8"

# saxutils.escape covers &, < and >; quotes are added here
_QUOTE_ENTITIES = {'"': "&quot;", "'": "&apos;"}

# control characters XML 1.0 does not allow, even as character references
_INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def escape_xml(value: str) -> str:
    """Escape the five XML special characters and drop disallowed control characters."""
    return escape(_INVALID_XML_CHARS.sub("", value), _QUOTE_ENTITIES)


def format_rfc1123(value: datetime) -> str:
    """Format a timestamp like ``Mon, 19 Oct 2026 10:00:00 GMT``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)


def _author_name(prompt: Prompt) -> str:
    author = prompt.author
    if author is None:
        return ""
    return author.name or author.username or ""


def render_item(prompt: Prompt, origin: str) -> str:
    """Render one ``<item>``; empty optional fields are left out."""
    url = escape_xml(to_absolute_url(origin, prompt_path(prompt.id, prompt.slug)))
    parts = [
        "<item>",
        f"<title>{escape_xml(prompt.title)}</title>",
        f"<link>{url}</link>",
        f"<guid>{url}</guid>",
    ]
    if prompt.description:
        parts.append(f"<description>{escape_xml(prompt.description)}</description>")
    author = _author_name(prompt)
    if author:
        parts.append(f"<author>{escape_xml(author)}</author>")
    parts.append(f"<pubDate>{format_rfc1123(prompt.created_at)}</pubDate>")
    parts.append("</item>")
    return "".join(parts)


def render_feed(
    site: SiteConfig,
    origin: str,
    prompts: list[Prompt],
    now: datetime | None = None,
) -> str:
    """Render the full RSS document for *prompts* (newest first)."""
    feed_url = escape_xml(to_absolute_url(origin, FEED_PATH))
    site_url = escape_xml(to_absolute_url(origin, "/"))
    if prompts:
        last_build = prompts[0].updated_at or prompts[0].created_at
    else:
        last_build = now or datetime.now(timezone.utc)

    return "".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
            "<channel>",
            f"<title>{escape_xml(site.branding.name)}</title>",
            f"<description>{escape_xml(site.branding.description)}</description>",
            f"<link>{site_url}</link>",
            f"<language>{escape_xml(site.default_locale)}</language>",
            f"<lastBuildDate>{format_rfc1123(last_build)}</lastBuildDate>",
            f'<atom:link href="{feed_url}" rel="self" type="application/rss+xml" />',
            *(render_item(prompt, origin) for prompt in prompts),
            "</channel>",
            "</rss>",
        ]
    )


async def build_feed(
    site: SiteConfig,
    origin: str,
    catalog: PromptCatalog,
    now: datetime | None = None,
) -> str:
    """Fetch the newest public prompts and render them as RSS."""
    prompts = await catalog.list_recent_public_prompts(MAX_FEED_ITEMS)
    prompts = prompts[:MAX_FEED_ITEMS]
    logger.info("Built feed with %d items", len(prompts))
    return render_feed(site, origin, prompts, now=now)
