from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateRecordError, RepositoryError
from src.app.repositories.user_repository import IUserRepository
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by normalized email address"""
        stmt = select(User).where(User.email == email)
        try:
            result = await self.session.exec(stmt)
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to load user by email") from exc
        return result.one_or_none()

    async def create(self, user: User) -> User:
        """Create a new user"""
        self.session.add(user)
        try:
            await self.session.flush()
            await self.session.refresh(user)
        except IntegrityError as exc:
            raise DuplicateRecordError("User email already exists") from exc
        except SQLAlchemyError as exc:
            raise RepositoryError("Failed to create user") from exc
        return user
