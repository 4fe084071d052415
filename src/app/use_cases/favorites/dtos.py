"""
Favorites Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from src.domain.entities import Favorite


class AddFavoriteCommand(BaseModel):
    """
    Add favorite command - repository snapshot as submitted

    The owner is not part of the command; it always comes from the verified
    session token.
    """

    repo_id: Optional[int] = None
    repo_name: Optional[str] = None
    repo_url: Optional[str] = None
    description: Optional[str] = None
    language: Optional[str] = None
    stars_count: Optional[int] = None


class FavoriteInfo(BaseModel):
    """Favorite as returned to clients"""

    id: str
    user_id: str
    repo_id: int
    repo_name: str
    repo_url: str
    description: Optional[str]
    language: Optional[str]
    stars_count: int
    created_at: datetime

    @classmethod
    def from_entity(cls, favorite: Favorite) -> "FavoriteInfo":
        return cls(
            id=str(favorite.id),
            user_id=str(favorite.user_id),
            repo_id=favorite.repo_id,
            repo_name=favorite.repo_name,
            repo_url=favorite.repo_url,
            description=favorite.description,
            language=favorite.language,
            stars_count=favorite.stars_count,
            created_at=favorite.created_at,
        )


class ListFavoritesResponse(BaseModel):
    favorites: List[FavoriteInfo]


class AddFavoriteResponse(BaseModel):
    favorite: FavoriteInfo


class RemoveFavoriteResponse(BaseModel):
    message: str
