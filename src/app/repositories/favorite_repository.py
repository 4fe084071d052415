from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from src.domain.entities import Favorite


class IFavoriteRepository(ABC):
    """Favorite repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[Favorite]:
        """Get all favorites owned by a user"""
        pass

    @abstractmethod
    async def create(self, favorite: Favorite) -> Favorite:
        """Create a new favorite. Raises DuplicateRecordError on (user_id, repo_id) clash."""
        pass

    @abstractmethod
    async def delete_owned(self, favorite_id: UUID, user_id: UUID) -> int:
        """Delete a favorite only if owned by user_id. Returns affected row count."""
        pass
