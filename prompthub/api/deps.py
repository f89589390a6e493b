"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from prompthub.config import Settings, SiteConfig, get_settings
from prompthub.database import async_session_maker
from prompthub.repositories import PostgresCatalog, PromptCatalog
from prompthub.services.search import OpenAIEmbedder, SemanticSearch
from prompthub.services.seo import resolve_base_url

AppSettings = Annotated[Settings, Depends(get_settings)]


def get_catalog() -> PromptCatalog:
    """Catalog backed by the application's session factory."""
    return PostgresCatalog(async_session_maker)


def get_site(settings: AppSettings) -> SiteConfig:
    return settings.site


def get_base_url(request: Request, settings: AppSettings) -> str:
    """Public origin: configured override first, then request headers."""
    return resolve_base_url(settings.explicit_origin, request.headers)


def get_active_locale(request: Request, settings: AppSettings) -> str:
    """Locale from the ``/{locale}`` URL prefix, or the default locale."""
    locale = request.path_params.get("locale")
    if locale is None:
        return settings.default_locale
    if locale not in settings.locales:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not found",
        )
    return locale


Catalog = Annotated[PromptCatalog, Depends(get_catalog)]


def get_semantic_search(catalog: Catalog, settings: AppSettings) -> SemanticSearch | None:
    """Semantic search when it is enabled and configured, else ``None``."""
    if not settings.semantic_search_available:
        return None
    return SemanticSearch(catalog, OpenAIEmbedder(settings))


# Type aliases for dependency injection
Site = Annotated[SiteConfig, Depends(get_site)]
BaseUrl = Annotated[str, Depends(get_base_url)]
ActiveLocale = Annotated[str, Depends(get_active_locale)]
Semantic = Annotated[SemanticSearch | None, Depends(get_semantic_search)]
