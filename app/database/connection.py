"""
Database connection management
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database.models.base import BaseModel

logger = logging.getLogger(__name__)


class Database:
    """
    Async engine and session factory with an explicit lifecycle.

    One instance is created at application startup and shared by all
    requests; each request takes its own session through ``session()``.
    """

    def __init__(self, url: str, echo: bool = False, create_schema: bool = False):
        self.url = url
        self.echo = echo
        self.create_schema = create_schema
        self.engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None

    async def connect(self) -> None:
        """Создание engine и (опционально) таблиц."""
        if self.engine is not None:
            return
        engine_kwargs = {"echo": self.echo, "pool_pre_ping": True}
        if ":memory:" in self.url:
            # One shared connection, otherwise every checkout sees an empty DB
            engine_kwargs.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        elif not self.url.startswith("sqlite"):
            engine_kwargs.update(pool_size=10, max_overflow=20)
        self.engine = create_async_engine(self.url, **engine_kwargs)
        self._session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        try:
            if self.create_schema:
                async with self.engine.begin() as conn:
                    await conn.run_sync(BaseModel.metadata.create_all)
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    async def disconnect(self) -> None:
        """Закрытие соединения с базой данных"""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_maker = None
        logger.info("Database connection closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Сессия на время одной операции; закрывается всегда."""
        if self._session_maker is None:
            raise RuntimeError("Database is not connected")
        async with self._session_maker() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
