"""
Database lifecycle.

One ``Database`` is created per process by the application lifespan. It owns
the async engine (and its connection pool) and hands out sessions to the
unit-of-work dependency.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Table registration on SQLModel.metadata
import src.domain.entities  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, uri: str, echo: bool = False):
        self.engine: AsyncEngine = create_async_engine(uri, echo=echo, future=True)
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables ensured")

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection pool disposed")
