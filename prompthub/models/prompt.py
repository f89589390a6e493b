"""Prompt model and its vote/contributor associations."""

from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, String, Table, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from prompthub.database import Base

prompt_contributors = Table(
    "prompt_contributors",
    Base.metadata,
    Column(
        "prompt_id",
        UUID(as_uuid=False),
        ForeignKey("prompts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Prompt(Base):
    """A user-submitted prompt."""

    __tablename__ = "prompts"

    id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    slug: Mapped[str | None] = mapped_column(String(255), nullable=True)
    title: Mapped[str] = mapped_column(String(512))
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text)
    type: Mapped[str] = mapped_column(String(32), default="TEXT", index=True)

    # Visibility
    is_private: Mapped[bool] = mapped_column(Boolean, default=False)
    is_unlisted: Mapped[bool] = mapped_column(Boolean, default=False)
    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    author_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        index=True,
    )
    category_id: Mapped[str | None] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("categories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    # Stored embedding vector for semantic search
    embedding: Mapped[list[float] | None] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    author: Mapped["User"] = relationship(
        "User", back_populates="prompts", foreign_keys=[author_id]
    )
    category: Mapped["Category | None"] = relationship("Category", back_populates="prompts")
    tags: Mapped[list["Tag"]] = relationship(
        "Tag", secondary="prompt_tags", back_populates="prompts"
    )
    contributors: Mapped[list["User"]] = relationship("User", secondary=prompt_contributors)
    votes: Mapped[list["PromptVote"]] = relationship(
        "PromptVote", back_populates="prompt", cascade="all, delete-orphan"
    )


class PromptVote(Base):
    """An upvote cast by a user on a prompt."""

    __tablename__ = "prompt_votes"

    user_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    prompt_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("prompts.id", ondelete="CASCADE"),
        primary_key=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
    )

    prompt: Mapped["Prompt"] = relationship("Prompt", back_populates="votes")


# Forward references
from prompthub.models.taxonomy import Category, Tag  # noqa: E402
from prompthub.models.user import User  # noqa: E402
