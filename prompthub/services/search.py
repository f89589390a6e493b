"""Prompt search: keyword search plus optional embedding-based search."""

import asyncio
import logging
import math
from dataclasses import dataclass, field
from typing import Protocol

from prompthub.config import Settings
from prompthub.repositories.catalog import PromptCatalog
from prompthub.repositories.postgres import PromptFilters, PromptListing

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """One page of search hits plus the total number of matches."""
    listings: list[PromptListing] = field(default_factory=list)
    total: int = 0


class PromptSearch(Protocol):
    """A way of turning listing filters into a page of prompts."""

    async def search(self, filters: PromptFilters, offset: int, limit: int) -> SearchResult: ...


class Embedder(Protocol):
    async def embed(self, text: str) -> list[float]: ...


class KeywordSearch:
    """Case-insensitive substring search over title, content and description."""

    def __init__(self, catalog: PromptCatalog):
        self.catalog = catalog

    async def search(self, filters: PromptFilters, offset: int = 0, limit: int = 12) -> SearchResult:
        listings, total = await asyncio.gather(
            self.catalog.search_prompts(filters, offset, limit),
            self.catalog.count_prompts(filters),
        )
        return SearchResult(listings=listings, total=total)


class OpenAIEmbedder:
    """Embeds search queries with the OpenAI embeddings API."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client = None

    def _get_client(self):
        """Lazy load OpenAI client."""
        if self._client is None:
            from openai import AsyncOpenAI
            self._client = AsyncOpenAI(api_key=self.settings.openai_api_key)
        return self._client

    async def embed(self, text: str) -> list[float]:
        response = await self._get_client().embeddings.create(
            model=self.settings.embedding_model,
            input=text,
        )
        return list(response.data[0].embedding)


def cosine_similarity(a: list[float], b: list[float]) -> float:
    """Cosine similarity, 0.0 when either vector is zero or sizes differ."""
    if len(a) != len(b):
        return 0.0
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    if norm == 0:
        return 0.0
    return sum(x * y for x, y in zip(a, b)) / norm


class SemanticSearch:
    """Ranks public prompts by similarity between stored and query embeddings.

    Only the free-text query is used; the other filters apply to keyword
    search alone.
    """

    def __init__(self, catalog: PromptCatalog, embedder: Embedder, min_similarity: float = 0.0):
        self.catalog = catalog
        self.embedder = embedder
        self.min_similarity = min_similarity

    async def search(self, filters: PromptFilters, offset: int = 0, limit: int = 12) -> SearchResult:
        if not filters.q:
            return SearchResult()

        query_vector, stored = await asyncio.gather(
            self.embedder.embed(filters.q),
            self.catalog.list_prompt_embeddings(),
        )
        scored = [
            (cosine_similarity(query_vector, embedding), prompt_id)
            for prompt_id, embedding in stored
        ]
        ranked = [
            prompt_id
            for score, prompt_id in sorted(scored, key=lambda item: item[0], reverse=True)
            if score > self.min_similarity
        ]
        page_ids = ranked[offset:offset + limit]
        listings = await self.catalog.get_prompts_by_ids(page_ids)
        return SearchResult(listings=listings, total=len(listings))


async def search_prompts(
    filters: PromptFilters,
    keyword: PromptSearch,
    semantic: PromptSearch | None = None,
    use_semantic: bool = False,
    offset: int = 0,
    limit: int = 12,
) -> SearchResult:
    """Run semantic search when requested, otherwise or on failure keyword search.

    An empty semantic result also falls back, so a query never returns
    nothing just because embeddings are missing.
    """
    if use_semantic and semantic is not None and filters.q:
        try:
            result = await semantic.search(filters, offset, limit)
        except Exception as exc:
            logger.warning("Semantic search failed, falling back to keyword search: %s", exc)
        else:
            if result.listings:
                return result
            logger.info("Semantic search returned no results for %r", filters.q)

    return await keyword.search(filters, offset, limit)
