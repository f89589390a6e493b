"""Shared fixtures: an in-memory catalog and site configuration."""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from prompthub.config import Branding, Features, SiteConfig
from prompthub.repositories import PromptFilters, PromptListing

BASE_TIME = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def make_user(username: str = "alice", name: str | None = "Alice", **kwargs) -> SimpleNamespace:
    defaults = {
        "id": f"user-{username}",
        "username": username,
        "name": name,
        "avatar": None,
        "updated_at": BASE_TIME,
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def make_prompt(index: int = 1, **kwargs) -> SimpleNamespace:
    created = BASE_TIME + timedelta(minutes=index)
    defaults = {
        "id": f"p{index}",
        "slug": f"prompt-{index}",
        "title": f"Prompt {index}",
        "description": f"Description {index}",
        "content": f"Content {index}",
        "type": "TEXT",
        "is_private": False,
        "is_unlisted": False,
        "deleted_at": None,
        "author": make_user(),
        "category": None,
        "tags": [],
        "contributors": [],
        "embedding": None,
        "created_at": created,
        "updated_at": created + timedelta(hours=1),
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def _is_public(prompt) -> bool:
    return not prompt.is_private and not prompt.is_unlisted and prompt.deleted_at is None


class FakeCatalog:
    """In-memory stand-in for :class:`PostgresCatalog`."""

    def __init__(self, prompts=(), categories=(), tags=(), users=()):
        self.prompts = list(prompts)
        self.categories = list(categories)
        self.tags = list(tags)
        self.users = list(users)
        self.calls: list[str] = []

    def _matching(self, filters: PromptFilters) -> list:
        found = [p for p in self.prompts if _is_public(p)]
        if filters.q:
            needle = filters.q.lower()
            found = [
                p for p in found
                if needle in p.title.lower() or needle in (p.description or "").lower()
            ]
        if filters.type:
            found = [p for p in found if p.type == filters.type]
        return sorted(found, key=lambda p: p.created_at, reverse=filters.sort != "oldest")

    async def list_public_prompts(self):
        self.calls.append("prompts")
        return [p for p in self.prompts if _is_public(p)]

    async def list_recent_public_prompts(self, limit):
        self.calls.append("recent")
        public = [p for p in self.prompts if _is_public(p)]
        return sorted(public, key=lambda p: p.created_at, reverse=True)[:limit]

    async def search_prompts(self, filters, offset, limit):
        self.calls.append("search")
        return [
            PromptListing(prompt=p, vote_count=0, contributor_count=len(p.contributors))
            for p in self._matching(filters)[offset:offset + limit]
        ]

    async def count_prompts(self, filters):
        self.calls.append("count")
        return len(self._matching(filters))

    async def get_prompts_by_ids(self, prompt_ids):
        by_id = {p.id: p for p in self.prompts if _is_public(p)}
        return [PromptListing(prompt=by_id[i]) for i in prompt_ids if i in by_id]

    async def list_prompt_embeddings(self):
        return [(p.id, p.embedding) for p in self.prompts if _is_public(p) and p.embedding]

    async def list_categories(self):
        self.calls.append("categories")
        return self.categories

    async def list_tags(self):
        self.calls.append("tags")
        return self.tags

    async def list_users_with_public_prompts(self):
        self.calls.append("users")
        return self.users


@pytest.fixture
def site() -> SiteConfig:
    return SiteConfig(
        branding=Branding(
            name="Prompt Hub",
            description="Share prompts & more",
            logo="/logo.svg",
        ),
        locales=("en", "es", "fr"),
        default_locale="en",
        features=Features(categories=True, tags=True, mcp=True),
    )


@pytest.fixture
def origin() -> str:
    return "https://prompts.example"
