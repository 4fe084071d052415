"""
Favorite Entity

A GitHub repository saved by a user.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import BigInteger
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class Favorite(SQLModel, table=True):
    """
    Favorite entity - snapshot of a GitHub repository saved by one user.

    Business Rules:
    - (user_id, repo_id) must be unique; the same repo may be saved by many users
    - repo_name, repo_url, description, language and stars_count are captured
      at save time and never re-synced
    - Favorites are created and deleted, never updated
    """

    __tablename__ = "favorites"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    repo_id: int = Field(sa_column=Column(BigInteger, nullable=False))

    repo_name: str = Field(max_length=255)
    repo_url: str = Field(max_length=2048)
    description: Optional[str] = Field(default=None)
    language: Optional[str] = Field(default=None, max_length=100)
    stars_count: int = Field(default=0)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )

    __table_args__ = (
        Index("idx_favorite_user_repo", "user_id", "repo_id", unique=True),
    )
