from typing import List
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateRecordError, RepositoryError
from src.app.repositories.favorite_repository import IFavoriteRepository
from src.domain.entities import Favorite


class FavoriteRepository(IFavoriteRepository):
    """Favorite repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> List[Favorite]:
        """Get all favorites owned by a user"""
        stmt = select(Favorite).where(Favorite.user_id == user_id)
        try:
            result = await self.session.exec(stmt)
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to load favorites") from exc
        return list(result.all())

    async def create(self, favorite: Favorite) -> Favorite:
        """
        Create a new favorite.

        The (user_id, repo_id) unique index decides duplicates; there is no
        lookup before the insert.
        """
        self.session.add(favorite)
        try:
            await self.session.flush()
            await self.session.refresh(favorite)
        except IntegrityError as exc:
            raise DuplicateRecordError("Favorite already exists for user") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to create favorite") from exc
        return favorite

    async def delete_owned(self, favorite_id: UUID, user_id: UUID) -> int:
        """Delete a favorite matching both id and owner"""
        stmt = delete(Favorite).where(
            Favorite.id == favorite_id, Favorite.user_id == user_id
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to delete favorite") from exc
        return result.rowcount
