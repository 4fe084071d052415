"""
Add Favorite Use Case

Saves a repository snapshot to the caller's favorites.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.repositories.errors import DuplicateRecordError, RepositoryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Favorite

from .dtos import AddFavoriteCommand, AddFavoriteResponse, FavoriteInfo

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("repo_id", "repo_name", "repo_url")


class AddFavoriteUseCase:
    """
    Use case for saving a favorite.

    Business Rules:
    - repo_id, repo_name and repo_url are required
    - description/language default to null, stars_count to 0
    - (user_id, repo_id) is unique per user; the store's unique index detects
      duplicates so concurrent adds cannot both succeed
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: AddFavoriteCommand
    ) -> Result[AddFavoriteResponse]:
        """
        Execute add favorite use case.

        Args:
            user_id: Owner, taken from the verified session token
            command: Repository snapshot to save

        Returns:
            Result with AddFavoriteResponse, or Error(VALIDATION_ERROR |
            FAVORITE_ALREADY_EXISTS | INTERNAL_ERROR)
        """
        missing = [
            name
            for name in REQUIRED_FIELDS
            if getattr(command, name) is None or getattr(command, name) == ""
        ]
        if missing:
            return Return.err(
                Error(
                    "VALIDATION_ERROR",
                    f"Missing required fields: {', '.join(missing)}",
                    details=missing,
                )
            )

        favorite = Favorite(
            user_id=user_id,
            repo_id=command.repo_id,
            repo_name=command.repo_name,
            repo_url=command.repo_url,
            description=command.description or None,
            language=command.language or None,
            stars_count=command.stars_count or 0,
        )

        try:
            async with self.uow:
                favorite = await self.uow.favorites.create(favorite)
                await self.uow.commit()
                info = FavoriteInfo.from_entity(favorite)
        except DuplicateRecordError:
            return Return.err(
                Error("FAVORITE_ALREADY_EXISTS", "Repo already in favorites")
            )
        except RepositoryError:
            logger.exception(f"Failed to add favorite for user {user_id}")
            return Return.err(Error("INTERNAL_ERROR", "Failed to add favorite"))

        return Return.ok(AddFavoriteResponse(favorite=info))
