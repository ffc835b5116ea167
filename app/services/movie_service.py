"""
Movie service: CRUD with read-through cache and director reference checks
"""
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import IntegrityError

from app.cache.cache_service import CacheService
from app.cache.entity_cache import EntityCache
from app.cache.keys import MOVIE_KEYS
from app.database.repositories.director_repository import DirectorRepository
from app.database.repositories.movie_repository import MovieRepository
from app.monitoring.metrics import track_mutation
from app.schemas.director import Director
from app.schemas.movie import Movie, MovieView, to_movie_view
from app.services.director_service import DirectorService
from app.services.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class MovieService:
    """Сервис фильмов: БД + кэш, проверка режиссёра и уникальности imdbId."""

    def __init__(
        self,
        movie_repository: MovieRepository,
        director_repository: DirectorRepository,
        director_service: DirectorService,
        cache_service: CacheService,
        ttl: Optional[int] = None,
    ):
        self._movies = movie_repository
        self._directors = director_repository
        self._cache = EntityCache(cache_service, MOVIE_KEYS, Movie, ttl)
        # Cached director reads for the expanded read model
        self._director_service = director_service

    async def _ensure_director_exists(self, director_id: str) -> None:
        if not await self._directors.exists(director_id):
            logger.warning(
                "Unknown director reference %s", director_id,
                extra={"entity": "movie"},
            )
            raise ValidationError(
                f"Director with ID {director_id} does not exist."
            )

    async def _ensure_imdb_id_free(self, imdb_id: str, movie_id: Optional[str] = None) -> None:
        other = await self._movies.get_by_imdb_id(imdb_id)
        if other is not None and other.id != movie_id:
            logger.warning(
                "Duplicate imdbId %s", imdb_id,
                extra={"entity": "movie", "entity_id": other.id},
            )
            raise ValidationError(f"Movie with imdbId {imdb_id} already exists.")

    @staticmethod
    def _duplicate_imdb_id(imdb_id: str) -> ValidationError:
        """Unique index on imdb_id tripped by a concurrent write that passed the check."""
        logger.warning(
            "Duplicate imdbId %s rejected by the store", imdb_id,
            extra={"entity": "movie"},
        )
        return ValidationError(f"Movie with imdbId {imdb_id} already exists.")

    async def create(self, data: Dict[str, Any]) -> Movie:
        """Создание фильма: проверки, запись, обновление кэша коллекции."""
        if data.get("director_id"):
            await self._ensure_director_exists(data["director_id"])
        if data.get("imdb_id"):
            await self._ensure_imdb_id_free(data["imdb_id"])

        try:
            movie = await self._movies.create(**data)
        except IntegrityError as e:
            if not data.get("imdb_id"):
                raise
            raise self._duplicate_imdb_id(data["imdb_id"]) from e
        logger.info(
            "Movie created",
            extra={"entity": "movie", "entity_id": movie.id},
        )
        track_mutation("movie", "create")
        await self._cache.refresh_collection(self._movies.get_all)
        return movie

    async def get_all(self) -> List[Movie]:
        """Все фильмы: сначала кэш, затем БД."""
        cached = await self._cache.get_collection()
        if cached is not None:
            return cached
        movies = await self._movies.get_all()
        await self._cache.set_collection(movies)
        return movies

    async def get_by_id(self, movie_id: str) -> Movie:
        """Фильм по ID; NotFoundError если его нет."""
        cached = await self._cache.get_item(movie_id)
        if cached is not None:
            return cached
        movie = await self._movies.get_by_id(movie_id)
        if movie is None:
            raise NotFoundError(f"Movie with ID {movie_id} not found.")
        await self._cache.set_item(movie)
        return movie

    async def _director_snapshot(self, director_id: Optional[str]) -> Optional[Director]:
        if not director_id:
            return None
        try:
            return await self._director_service.get_by_id(director_id)
        except NotFoundError:
            return None

    async def get_view_by_id(self, movie_id: str) -> MovieView:
        """Фильм с вложенным режиссёром."""
        movie = await self.get_by_id(movie_id)
        return to_movie_view(movie, await self._director_snapshot(movie.director_id))

    async def get_all_views(self) -> List[MovieView]:
        """Все фильмы с вложенными режиссёрами."""
        movies = await self.get_all()
        snapshots: Dict[str, Optional[Director]] = {}
        views = []
        for movie in movies:
            if movie.director_id and movie.director_id not in snapshots:
                snapshots[movie.director_id] = await self._director_snapshot(movie.director_id)
            director = snapshots.get(movie.director_id) if movie.director_id else None
            views.append(to_movie_view(movie, director))
        return views

    async def update(self, movie_id: str, data: Dict[str, Any]) -> Movie:
        """Частичное обновление фильма."""
        existing = await self._movies.get_by_id(movie_id)
        if existing is None:
            raise NotFoundError(f"Movie with ID {movie_id} not found.")

        new_director_id = data.get("director_id")
        if new_director_id and new_director_id != existing.director_id:
            await self._ensure_director_exists(new_director_id)

        new_imdb_id = data.get("imdb_id")
        if new_imdb_id and new_imdb_id != existing.imdb_id:
            await self._ensure_imdb_id_free(new_imdb_id, movie_id)

        await self._cache.invalidate_item(movie_id)

        try:
            updated = await self._movies.update_by_id(movie_id, **data)
        except IntegrityError as e:
            if not data.get("imdb_id"):
                raise
            raise self._duplicate_imdb_id(data["imdb_id"]) from e
        if updated is None:
            raise NotFoundError(f"Movie with ID {movie_id} not found.")
        logger.info(
            "Movie updated: %s", sorted(data),
            extra={"entity": "movie", "entity_id": movie_id},
        )
        track_mutation("movie", "update")

        await self._cache.refresh_collection(self._movies.get_all)
        return updated

    async def delete(self, movie_id: str) -> bool:
        """Удаление фильма."""
        await self._cache.invalidate_item(movie_id)

        existing = await self._movies.get_by_id(movie_id)
        if existing is None:
            raise NotFoundError(f"Movie with ID {movie_id} not found.")

        if not await self._movies.delete_by_id(movie_id):
            raise NotFoundError(f"Movie with ID {movie_id} not found.")
        logger.info(
            "Movie deleted",
            extra={"entity": "movie", "entity_id": movie_id},
        )
        track_mutation("movie", "delete")

        await self._cache.refresh_collection(self._movies.get_all)
        return True
