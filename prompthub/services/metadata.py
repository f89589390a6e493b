"""Localized page metadata (canonical, alternates, OpenGraph, Twitter card)."""

from dataclasses import dataclass, field
from typing import Any

from prompthub.config import SiteConfig
from prompthub.services.seo import build_links, to_absolute_url

DEFAULT_OG_IMAGE = "/og.png"
DEFAULT_OG_WIDTH = 1200
DEFAULT_OG_HEIGHT = 630
TWITTER_CARD = "summary_large_image"


@dataclass
class OpenGraphImage:
    """A social preview image, optionally with dimensions."""
    url: str
    width: int | None = None
    height: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"url": self.url}
        if self.width is not None:
            data["width"] = self.width
        if self.height is not None:
            data["height"] = self.height
        return data


@dataclass
class PageMetadata:
    """Everything a page needs for its ``<head>`` SEO tags."""
    title: str
    description: str
    canonical: str
    alternates: dict[str, str]
    site_name: str
    locale: str
    images: list[OpenGraphImage] = field(default_factory=list)
    twitter_card: str = TWITTER_CARD

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the nested shape consumed by the page templates."""
        images = [image.to_dict() for image in self.images]
        return {
            "title": self.title,
            "description": self.description,
            "alternates": {
                "canonical": self.canonical,
                "languages": dict(self.alternates),
            },
            "open_graph": {
                "title": self.title,
                "description": self.description,
                "url": self.canonical,
                "site_name": self.site_name,
                "locale": self.locale,
                "images": images,
            },
            "twitter": {
                "card": self.twitter_card,
                "title": self.title,
                "description": self.description,
                "images": [image["url"] for image in images],
            },
        }


ImageInput = str | dict[str, Any] | OpenGraphImage | None


def _resolve_images(origin: str, image: ImageInput) -> list[OpenGraphImage]:
    if not image:
        return [
            OpenGraphImage(
                url=to_absolute_url(origin, DEFAULT_OG_IMAGE),
                width=DEFAULT_OG_WIDTH,
                height=DEFAULT_OG_HEIGHT,
            )
        ]
    if isinstance(image, str):
        return [OpenGraphImage(url=to_absolute_url(origin, image))]
    if isinstance(image, dict):
        image = OpenGraphImage(
            url=image["url"],
            width=image.get("width"),
            height=image.get("height"),
        )
    return [
        OpenGraphImage(
            url=to_absolute_url(origin, image.url),
            width=image.width,
            height=image.height,
        )
    ]


def build_metadata(
    site: SiteConfig,
    origin: str,
    locale: str,
    *,
    title: str,
    description: str,
    path: str | None = None,
    image: ImageInput = None,
) -> PageMetadata:
    """Assemble metadata for one page as served in *locale*.

    Args:
        site: Site configuration snapshot (locales, branding).
        origin: Resolved public origin.
        locale: Locale of the request being served.
        title: Page title.
        description: Page description.
        path: Route path, optionally with a query string. Defaults to ``/``.
        image: Preview image as a URL, or a mapping/``OpenGraphImage`` with
            ``url`` and optional ``width``/``height``. Defaults to the
            site-wide 1200x630 placeholder.
    """
    links = build_links(
        origin,
        path or "/",
        site.locales,
        site.default_locale,
        active_locale=locale,
    )
    return PageMetadata(
        title=title,
        description=description,
        canonical=links.canonical,
        alternates=links.alternates,
        site_name=site.branding.name,
        locale=locale,
        images=_resolve_images(origin, image),
    )
