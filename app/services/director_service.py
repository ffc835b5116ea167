"""
Director service: CRUD with read-through cache and deletion guard
"""
import logging
from typing import Any, Dict, List, Optional

from app.cache.cache_service import CacheService
from app.cache.entity_cache import EntityCache
from app.cache.keys import DIRECTOR_KEYS
from app.database.repositories.director_repository import DirectorRepository
from app.database.repositories.movie_repository import MovieRepository
from app.monitoring.metrics import track_mutation
from app.schemas.director import Director
from app.schemas.movie import Movie
from app.services.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class DirectorService:
    """Сервис режиссёров: БД + кэш, запрет удаления при наличии фильмов."""

    def __init__(
        self,
        director_repository: DirectorRepository,
        movie_repository: MovieRepository,
        cache_service: CacheService,
        ttl: Optional[int] = None,
    ):
        self._directors = director_repository
        self._movies = movie_repository
        self._cache = EntityCache(cache_service, DIRECTOR_KEYS, Director, ttl)

    async def create(self, data: Dict[str, Any]) -> Director:
        """Создание режиссёра и обновление кэша коллекции."""
        director = await self._directors.create(**data)
        logger.info(
            "Director created",
            extra={"entity": "director", "entity_id": director.id},
        )
        track_mutation("director", "create")
        await self._cache.refresh_collection(self._directors.get_all)
        return director

    async def get_all(self) -> List[Director]:
        """Все режиссёры: сначала кэш, затем БД."""
        cached = await self._cache.get_collection()
        if cached is not None:
            return cached
        directors = await self._directors.get_all()
        await self._cache.set_collection(directors)
        return directors

    async def get_by_id(self, director_id: str) -> Director:
        """Режиссёр по ID; NotFoundError если его нет."""
        cached = await self._cache.get_item(director_id)
        if cached is not None:
            return cached
        director = await self._directors.get_by_id(director_id)
        if director is None:
            raise NotFoundError(f"Director with ID {director_id} not found.")
        await self._cache.set_item(director)
        return director

    async def get_movies(self, director_id: str) -> List[Movie]:
        """Фильмы режиссёра (без кэша)."""
        if not await self._directors.exists(director_id):
            raise NotFoundError(f"Director with ID {director_id} not found.")
        return await self._movies.get_by_director_id(director_id)

    async def update(self, director_id: str, data: Dict[str, Any]) -> Director:
        """Частичное обновление режиссёра."""
        existing = await self._directors.get_by_id(director_id)
        if existing is None:
            raise NotFoundError(f"Director with ID {director_id} not found.")

        await self._cache.invalidate_item(director_id)

        updated = await self._directors.update_by_id(director_id, **data)
        if updated is None:
            raise NotFoundError(f"Director with ID {director_id} not found.")
        logger.info(
            "Director updated: %s", sorted(data),
            extra={"entity": "director", "entity_id": director_id},
        )
        track_mutation("director", "update")

        await self._cache.refresh_collection(self._directors.get_all)
        return updated

    async def delete(self, director_id: str) -> bool:
        """Удаление режиссёра; ConflictError если на него ссылаются фильмы."""
        await self._cache.invalidate_item(director_id)

        existing = await self._directors.get_by_id(director_id)
        if existing is None:
            raise NotFoundError(f"Director with ID {director_id} not found.")

        related = await self._movies.get_by_director_id(director_id)
        if related:
            logger.warning(
                "Director delete blocked by %d movies", len(related),
                extra={"entity": "director", "entity_id": director_id},
            )
            raise ConflictError(
                f"Cannot delete director with ID {director_id} because "
                f"{len(related)} movies are associated with them."
            )

        if not await self._directors.delete_by_id(director_id):
            raise NotFoundError(f"Director with ID {director_id} not found.")
        logger.info(
            "Director deleted",
            extra={"entity": "director", "entity_id": director_id},
        )
        track_mutation("director", "delete")

        await self._cache.refresh_collection(self._directors.get_all)
        return True
