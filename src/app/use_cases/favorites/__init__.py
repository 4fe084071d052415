"""
Favorites Use Cases

Per-user favorites, always scoped by the verified session identity.
"""

from .list_favorites_use_case import ListFavoritesUseCase
from .add_favorite_use_case import AddFavoriteUseCase
from .remove_favorite_use_case import RemoveFavoriteUseCase
from .dtos import (
    AddFavoriteCommand,
    FavoriteInfo,
    ListFavoritesResponse,
    AddFavoriteResponse,
    RemoveFavoriteResponse,
)

__all__ = [
    # Use Cases
    "ListFavoritesUseCase",
    "AddFavoriteUseCase",
    "RemoveFavoriteUseCase",
    # DTOs
    "AddFavoriteCommand",
    "FavoriteInfo",
    "ListFavoritesResponse",
    "AddFavoriteResponse",
    "RemoveFavoriteResponse",
]
