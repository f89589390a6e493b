"""Crawler-facing routes: sitemap, RSS feed and robots.txt."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from prompthub.api.deps import BaseUrl, Catalog, Site
from prompthub.services.feed import FEED_MEDIA_TYPE, build_feed
from prompthub.services.robots import build_robots_txt
from prompthub.services.sitemap import build_sitemap, render_sitemap_xml

router = APIRouter()


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(site: Site, origin: BaseUrl, catalog: Catalog) -> Response:
    """Sitemap of every public page with hreflang alternates."""
    entries = await build_sitemap(site, origin, catalog)
    return Response(content=render_sitemap_xml(entries), media_type="application/xml")


@router.get("/feed.xml", include_in_schema=False)
async def feed(site: Site, origin: BaseUrl, catalog: Catalog) -> Response:
    """RSS feed of the newest public prompts."""
    xml = await build_feed(site, origin, catalog)
    return Response(content=xml, headers={"Content-Type": FEED_MEDIA_TYPE})


@router.get("/robots.txt", include_in_schema=False)
async def robots(origin: BaseUrl) -> PlainTextResponse:
    """Crawler directives."""
    return PlainTextResponse(content=build_robots_txt(origin))
