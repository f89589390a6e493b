"""SQLAlchemy models."""

from prompthub.models.prompt import Prompt, PromptVote, prompt_contributors
from prompthub.models.taxonomy import Category, Tag, prompt_tags
from prompthub.models.user import User

__all__ = [
    "Prompt",
    "PromptVote",
    "User",
    "Category",
    "Tag",
    "prompt_tags",
    "prompt_contributors",
]
