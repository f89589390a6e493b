"""Page payload routes for the prompts listing and discover pages.

These are mounted both at the root (default locale) and under
``/{locale}``.
"""

import asyncio
from datetime import datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

from prompthub.api.deps import ActiveLocale, BaseUrl, Catalog, Semantic, Site
from prompthub.repositories import PromptFilters, PromptListing
from prompthub.services.messages import translate
from prompthub.services.metadata import build_metadata
from prompthub.services.search import KeywordSearch, search_prompts
from prompthub.services.seo import build_localized_url
from prompthub.services.structured_data import build_listing_graph
from prompthub.services.urls import prompt_path

router = APIRouter()

PER_PAGE = 12
SORT_ORDERS = ("newest", "oldest", "upvotes")


class AuthorResponse(BaseModel):
    """Public author information."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    name: str | None = None
    avatar: str | None = None


class CategoryResponse(BaseModel):
    """Category information."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    parent_id: str | None = None


class TagResponse(BaseModel):
    """Tag information."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    color: str | None = None


class PromptCardResponse(BaseModel):
    """A prompt as shown in listings."""

    id: str
    slug: str | None = None
    title: str
    description: str | None = None
    type: str
    url: str
    author: AuthorResponse
    category: CategoryResponse | None = None
    tags: list[TagResponse]
    contributors: list[AuthorResponse]
    vote_count: int
    contributor_count: int
    created_at: datetime
    updated_at: datetime | None = None


class FilterEcho(BaseModel):
    """Filters applied to the listing."""

    q: str | None = None
    type: str | None = None
    category: str | None = None
    tag: str | None = None
    sort: str | None = None


class PromptsPageResponse(BaseModel):
    """Everything the prompts listing page renders."""

    locale: str
    title: str
    metadata: dict[str, Any]
    structured_data: dict[str, Any]
    prompts: list[PromptCardResponse]
    total: int
    categories: list[CategoryResponse]
    tags: list[TagResponse]
    filters: FilterEcho
    ai_search_enabled: bool
    show_mcp: bool
    show_clone_tools: bool


class DiscoverPageResponse(BaseModel):
    """Metadata for the discover page."""

    locale: str
    metadata: dict[str, Any]


def _card(listing: PromptListing, origin: str, locale: str, default_locale: str) -> PromptCardResponse:
    prompt = listing.prompt
    return PromptCardResponse(
        id=prompt.id,
        slug=prompt.slug,
        title=prompt.title,
        description=prompt.description,
        type=prompt.type,
        url=build_localized_url(origin, prompt_path(prompt.id, prompt.slug), locale, default_locale),
        author=AuthorResponse.model_validate(prompt.author),
        category=CategoryResponse.model_validate(prompt.category) if prompt.category else None,
        tags=[TagResponse.model_validate(tag) for tag in prompt.tags],
        contributors=[AuthorResponse.model_validate(user) for user in prompt.contributors],
        vote_count=listing.vote_count,
        contributor_count=listing.contributor_count,
        created_at=prompt.created_at,
        updated_at=prompt.updated_at,
    )


@router.get("/prompts", response_model=PromptsPageResponse)
async def prompts_page(
    site: Site,
    origin: BaseUrl,
    locale: ActiveLocale,
    catalog: Catalog,
    semantic: Semantic,
    q: str | None = None,
    type: str | None = None,
    category: str | None = None,
    tag: str | None = None,
    sort: str | None = None,
    ai: str | None = None,
) -> PromptsPageResponse:
    """Prompts listing with filters, optional AI search and SEO data."""
    filters = PromptFilters(
        q=q or None,
        type=type or None,
        category=category or None,
        tag=tag or None,
        sort=sort if sort in SORT_ORDERS else "newest",
    )
    use_semantic = semantic is not None and ai == "1" and bool(filters.q)

    result, categories, tags = await asyncio.gather(
        search_prompts(
            filters,
            keyword=KeywordSearch(catalog),
            semantic=semantic,
            use_semantic=use_semantic,
            limit=PER_PAGE,
        ),
        catalog.list_categories(),
        catalog.list_tags(),
    )

    page_title = translate(locale, "prompts.title")
    metadata = build_metadata(
        site,
        origin,
        locale,
        title=translate(locale, "prompts.metadata.title", site_name=site.branding.name),
        description=translate(locale, "prompts.metadata.description", site_name=site.branding.name),
        path="/prompts",
    )
    structured_data = build_listing_graph(
        site,
        origin,
        locale,
        title=page_title,
        path="/prompts",
        listings=result.listings,
    )

    return PromptsPageResponse(
        locale=locale,
        title=page_title,
        metadata=metadata.to_dict(),
        structured_data=structured_data,
        prompts=[_card(listing, origin, locale, site.default_locale) for listing in result.listings],
        total=result.total,
        categories=[CategoryResponse.model_validate(c) for c in categories],
        tags=[TagResponse.model_validate(t) for t in tags],
        filters=FilterEcho(q=q, type=type, category=category, tag=tag, sort=sort),
        ai_search_enabled=semantic is not None,
        show_mcp=not site.use_clone_branding and site.features.mcp,
        show_clone_tools=not site.use_clone_branding,
    )


@router.get("/discover", response_model=DiscoverPageResponse)
async def discover_page(site: Site, origin: BaseUrl, locale: ActiveLocale) -> DiscoverPageResponse:
    """Discover page metadata."""
    metadata = build_metadata(
        site,
        origin,
        locale,
        title=translate(locale, "discovery.metadata.title", site_name=site.branding.name),
        description=translate(locale, "discovery.metadata.description", site_name=site.branding.name),
        path="/discover",
    )
    return DiscoverPageResponse(locale=locale, metadata=metadata.to_dict())
