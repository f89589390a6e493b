"""PostgreSQL repository implementations.

All queries here are read-only; the public site never writes through them.
"""

from dataclasses import dataclass
from typing import Literal

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, selectinload
from sqlalchemy.sql import ColumnElement

from prompthub.models import Category, Prompt, PromptVote, Tag, User

SortOrder = Literal["newest", "oldest", "upvotes"]


@dataclass
class PromptFilters:
    """Listing filters taken from the prompts page query string."""
    q: str | None = None
    type: str | None = None
    category: str | None = None
    tag: str | None = None
    sort: SortOrder = "newest"


@dataclass
class PromptListing:
    """A prompt with the aggregate counts shown on its card."""
    prompt: Prompt
    vote_count: int = 0
    contributor_count: int = 0


def public_prompt_clause() -> ColumnElement[bool]:
    """Prompts that may appear in listings, search, sitemap and feed."""
    return (
        Prompt.is_private.is_(False)
        & Prompt.is_unlisted.is_(False)
        & Prompt.deleted_at.is_(None)
    )


class PostgresPromptRepository:
    """PostgreSQL implementation of prompt repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _filter_clauses(self, filters: PromptFilters) -> list[ColumnElement[bool]]:
        clauses = [public_prompt_clause()]
        if filters.q:
            pattern = f"%{filters.q}%"
            clauses.append(
                or_(
                    Prompt.title.ilike(pattern),
                    Prompt.content.ilike(pattern),
                    Prompt.description.ilike(pattern),
                )
            )
        if filters.type:
            clauses.append(Prompt.type == filters.type)
        if filters.category:
            clauses.append(Prompt.category_id == filters.category)
        if filters.tag:
            clauses.append(Prompt.tags.any(Tag.slug == filters.tag))
        return clauses

    @staticmethod
    def _card_options():
        return (
            selectinload(Prompt.author),
            selectinload(Prompt.category),
            selectinload(Prompt.tags),
            selectinload(Prompt.contributors),
        )

    async def list_public(self) -> list[Prompt]:
        """Get every public prompt with just the fields a sitemap needs."""
        result = await self.session.execute(
            select(Prompt)
            .options(load_only(Prompt.id, Prompt.slug, Prompt.updated_at))
            .where(public_prompt_clause())
        )
        return list(result.scalars().all())

    async def list_recent_public(self, limit: int) -> list[Prompt]:
        """Get the most recently created public prompts, newest first."""
        result = await self.session.execute(
            select(Prompt)
            .options(selectinload(Prompt.author))
            .where(public_prompt_clause())
            .order_by(Prompt.created_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def search(
        self,
        filters: PromptFilters,
        offset: int = 0,
        limit: int = 12,
    ) -> list[PromptListing]:
        """Get one page of public prompts matching *filters*."""
        vote_count = (
            select(func.count(PromptVote.user_id))
            .where(PromptVote.prompt_id == Prompt.id)
            .correlate(Prompt)
            .scalar_subquery()
            .label("vote_count")
        )

        order_by = {
            "oldest": (Prompt.created_at.asc(),),
            "upvotes": (vote_count.desc(), Prompt.created_at.desc()),
        }.get(filters.sort, (Prompt.created_at.desc(),))

        result = await self.session.execute(
            select(Prompt, vote_count)
            .options(*self._card_options())
            .where(*self._filter_clauses(filters))
            .order_by(*order_by)
            .offset(offset)
            .limit(limit)
        )
        return [
            PromptListing(
                prompt=prompt,
                vote_count=votes or 0,
                contributor_count=len(prompt.contributors),
            )
            for prompt, votes in result.all()
        ]

    async def count(self, filters: PromptFilters) -> int:
        """Count public prompts matching *filters*."""
        result = await self.session.execute(
            select(func.count()).select_from(Prompt).where(*self._filter_clauses(filters))
        )
        return result.scalar_one()

    async def get_public_by_ids(self, prompt_ids: list[str]) -> list[PromptListing]:
        """Get public prompts by ID, in the order the IDs were given."""
        if not prompt_ids:
            return []

        result = await self.session.execute(
            select(Prompt)
            .options(*self._card_options(), selectinload(Prompt.votes))
            .where(public_prompt_clause(), Prompt.id.in_(prompt_ids))
        )
        by_id = {prompt.id: prompt for prompt in result.scalars().all()}
        return [
            PromptListing(
                prompt=by_id[prompt_id],
                vote_count=len(by_id[prompt_id].votes),
                contributor_count=len(by_id[prompt_id].contributors),
            )
            for prompt_id in prompt_ids
            if prompt_id in by_id
        ]

    async def list_embeddings(self) -> list[tuple[str, list[float]]]:
        """Get ``(id, embedding)`` for every public prompt that has one."""
        result = await self.session.execute(
            select(Prompt.id, Prompt.embedding).where(
                public_prompt_clause(), Prompt.embedding.is_not(None)
            )
        )
        return [(prompt_id, embedding) for prompt_id, embedding in result.all()]


class PostgresCategoryRepository:
    """PostgreSQL implementation of category repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> list[Category]:
        """Get all categories in display order, then by name."""
        result = await self.session.execute(
            select(Category).order_by(Category.order.asc(), Category.name.asc())
        )
        return list(result.scalars().all())


class PostgresTagRepository:
    """PostgreSQL implementation of tag repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> list[Tag]:
        """Get all tags ordered by name."""
        result = await self.session.execute(select(Tag).order_by(Tag.name.asc()))
        return list(result.scalars().all())


class PostgresUserRepository:
    """PostgreSQL implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_with_public_prompts(self) -> list[User]:
        """Get users who authored at least one public prompt."""
        result = await self.session.execute(
            select(User)
            .options(load_only(User.id, User.username, User.updated_at))
            .where(User.prompts.any(public_prompt_clause()))
        )
        return list(result.scalars().all())
