"""
Remove Favorite Use Case

Deletes one of the caller's favorites.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import RepositoryError
from src.app.services.unit_of_work import UnitOfWork

from .dtos import RemoveFavoriteResponse

logger = logging.getLogger(__name__)


class RemoveFavoriteUseCase:
    """
    Use case for removing a favorite.

    Business Rules:
    - Delete matches on id AND owner in a single statement
    - A favorite owned by someone else is reported exactly like a missing one
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, favorite_id: str
    ) -> Result[RemoveFavoriteResponse]:
        """
        Execute remove favorite use case.

        Args:
            user_id: Owner, taken from the verified session token
            favorite_id: Favorite id from the request path

        Returns:
            Result with RemoveFavoriteResponse, or Error(INVALID_FAVORITE_ID |
            FAVORITE_NOT_FOUND | INTERNAL_ERROR)
        """
        try:
            favorite_uuid = UUID(favorite_id)
        except (TypeError, ValueError):
            return Return.err(
                Error("INVALID_FAVORITE_ID", "Favorite repo ID is invalid")
            )

        try:
            async with self.uow:
                deleted = await self.uow.favorites.delete_owned(favorite_uuid, user_id)
                if deleted == 0:
                    return Return.err(
                        Error("FAVORITE_NOT_FOUND", "Favorite repo not found")
                    )
                await self.uow.commit()
        except RepositoryError:
            logger.exception(f"Failed to remove favorite {favorite_id}")
            return Return.err(
                Error("INTERNAL_ERROR", "Failed to remove favorite repo")
            )

        return Return.ok(RemoveFavoriteResponse(message="Favorite repo removed"))
