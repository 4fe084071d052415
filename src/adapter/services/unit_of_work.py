from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.favorite_repository import FavoriteRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.repositories.errors import DuplicateRecordError, RepositoryError
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.favorites = FavoriteRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        except IntegrityError as exc:
            raise DuplicateRecordError("Commit violated a uniqueness constraint") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to commit transaction") from exc

    async def rollback(self):
        await self.session.rollback()

    async def ping(self) -> bool:
        try:
            await self.session.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise RepositoryError("Database ping failed") from exc
        return True
