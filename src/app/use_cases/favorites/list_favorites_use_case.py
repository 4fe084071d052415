import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import RepositoryError
from src.app.services.unit_of_work import UnitOfWork

from .dtos import FavoriteInfo, ListFavoritesResponse

logger = logging.getLogger(__name__)


class ListFavoritesUseCase:
    """Returns every favorite owned by the caller, in store order, unpaginated."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ListFavoritesResponse]:
        try:
            async with self.uow:
                favorites = await self.uow.favorites.get_by_user_id(user_id)
                # Entities expire when the unit of work rolls back on exit
                items = [FavoriteInfo.from_entity(f) for f in favorites]
        except RepositoryError:
            logger.exception(f"Failed to fetch favorites for user {user_id}")
            return Return.err(Error("INTERNAL_ERROR", "Failed to fetch favorites"))

        return Return.ok(ListFavoritesResponse(favorites=items))
