"""Repository implementations for data access."""

from prompthub.repositories.catalog import PostgresCatalog, PromptCatalog
from prompthub.repositories.postgres import (
    PostgresCategoryRepository,
    PostgresPromptRepository,
    PostgresTagRepository,
    PostgresUserRepository,
    PromptFilters,
    PromptListing,
)

__all__ = [
    "PostgresCatalog",
    "PromptCatalog",
    "PostgresPromptRepository",
    "PostgresCategoryRepository",
    "PostgresTagRepository",
    "PostgresUserRepository",
    "PromptFilters",
    "PromptListing",
]
