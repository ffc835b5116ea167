"""Dependencies for FastAPI: DB session, cache and services"""
from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.cache.cache_service import CacheService
from app.database.repositories.director_repository import DirectorRepository
from app.database.repositories.movie_repository import MovieRepository
from app.services.director_service import DirectorService
from app.services.movie_service import MovieService


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """
    Dependency to get database session

    The Database instance is created in the application lifespan and
    stored on ``app.state``.

    Returns:
        AsyncSession: Database session
    """
    async with request.app.state.database.session() as session:
        yield session


def get_cache(request: Request) -> CacheService:
    """CacheService, созданный при старте приложения."""
    return request.app.state.cache


async def get_director_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
) -> DirectorService:
    return DirectorService(DirectorRepository(db), MovieRepository(db), cache)


async def get_movie_service(
    db: AsyncSession = Depends(get_db),
    cache: CacheService = Depends(get_cache),
    director_service: DirectorService = Depends(get_director_service),
) -> MovieService:
    return MovieService(MovieRepository(db), DirectorRepository(db), director_service, cache)
