"""Read-only catalog facade used by pages, sitemap and feed.

A single ``AsyncSession`` cannot run statements concurrently, so each call
opens its own short-lived session. That lets callers ``asyncio.gather``
independent reads.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from prompthub.models import Category, Prompt, Tag, User
from prompthub.repositories.postgres import (
    PostgresCategoryRepository,
    PostgresPromptRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PromptFilters,
    PromptListing,
)


class PromptCatalog(Protocol):
    """Queries the public site needs from the data store."""

    async def list_public_prompts(self) -> list[Prompt]: ...

    async def list_recent_public_prompts(self, limit: int) -> list[Prompt]: ...

    async def search_prompts(
        self, filters: PromptFilters, offset: int, limit: int
    ) -> list[PromptListing]: ...

    async def count_prompts(self, filters: PromptFilters) -> int: ...

    async def get_prompts_by_ids(self, prompt_ids: list[str]) -> list[PromptListing]: ...

    async def list_prompt_embeddings(self) -> list[tuple[str, list[float]]]: ...

    async def list_categories(self) -> list[Category]: ...

    async def list_tags(self) -> list[Tag]: ...

    async def list_users_with_public_prompts(self) -> list[User]: ...


class PostgresCatalog:
    """PostgreSQL implementation of :class:`PromptCatalog`."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def list_public_prompts(self) -> list[Prompt]:
        async with self.session_factory() as session:
            return await PostgresPromptRepository(session).list_public()

    async def list_recent_public_prompts(self, limit: int) -> list[Prompt]:
        async with self.session_factory() as session:
            return await PostgresPromptRepository(session).list_recent_public(limit)

    async def search_prompts(
        self, filters: PromptFilters, offset: int, limit: int
    ) -> list[PromptListing]:
        async with self.session_factory() as session:
            return await PostgresPromptRepository(session).search(filters, offset, limit)

    async def count_prompts(self, filters: PromptFilters) -> int:
        async with self.session_factory() as session:
            return await PostgresPromptRepository(session).count(filters)

    async def get_prompts_by_ids(self, prompt_ids: list[str]) -> list[PromptListing]:
        async with self.session_factory() as session:
            return await PostgresPromptRepository(session).get_public_by_ids(prompt_ids)

    async def list_prompt_embeddings(self) -> list[tuple[str, list[float]]]:
        async with self.session_factory() as session:
            return await PostgresPromptRepository(session).list_embeddings()

    async def list_categories(self) -> list[Category]:
        async with self.session_factory() as session:
            return await PostgresCategoryRepository(session).get_all()

    async def list_tags(self) -> list[Tag]:
        async with self.session_factory() as session:
            return await PostgresTagRepository(session).get_all()

    async def list_users_with_public_prompts(self) -> list[User]:
        async with self.session_factory() as session:
            return await PostgresUserRepository(session).get_with_public_prompts()
