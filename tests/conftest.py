"""
Pytest configuration and fixtures for Movie Director API tests
"""
import fnmatch
import json
import os
from typing import Any, AsyncGenerator, Dict, List, Optional

import pytest

from tests.factories import director_data, movie_data


# Set test environment variables BEFORE any imports
os.environ['DATABASE_URL'] = 'sqlite+aiosqlite:///:memory:'
os.environ['REDIS_URL'] = 'redis://localhost:6379/0'
os.environ['LOG_JSON'] = 'false'
os.environ['ENABLE_METRICS'] = 'true'
os.environ['DEBUG'] = 'false'


class InMemoryCache:
    """
    Dict-backed stand-in for CacheService.

    Values are stored as JSON strings like in Redis. Every call is appended
    to ``events`` so tests can assert on ordering; names listed in
    ``failing`` raise CacheError instead of running.
    """

    def __init__(self, events: Optional[List[str]] = None) -> None:
        self.store: Dict[str, str] = {}
        self.ttls: Dict[str, int] = {}
        self.events: List[str] = events if events is not None else []
        self.failing: set = set()
        self.default_ttl = 3600

    def _call(self, op: str, arg: str) -> None:
        from app.cache.exceptions import CacheError

        self.events.append(f"cache.{op}:{arg}")
        if op in self.failing:
            raise CacheError(f"simulated {op} failure")

    async def get(self, key: str) -> Optional[Any]:
        self._call("get", key)
        value = self.store.get(key)
        return json.loads(value) if value is not None else None

    async def set(self, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        self._call("set", key)
        self.store[key] = json.dumps(value)
        self.ttls[key] = ttl or self.default_ttl
        return True

    async def delete(self, key: str) -> bool:
        self._call("delete", key)
        self.store.pop(key, None)
        return True

    async def delete_pattern(self, pattern: str) -> int:
        self._call("delete_pattern", pattern)
        keys = [k for k in self.store if fnmatch.fnmatchcase(k, pattern)]
        for key in keys:
            del self.store[key]
        return len(keys)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def cached(self, key: str) -> Optional[Any]:
        value = self.store.get(key)
        return json.loads(value) if value is not None else None


@pytest.fixture
def cache() -> InMemoryCache:
    """In-memory cache double."""
    return InMemoryCache()


@pytest.fixture
async def database() -> AsyncGenerator:
    """
    Create an in-memory SQLite database for testing

    Yields:
        Database: connected database with tables created
    """
    from app.database.connection import Database

    db = Database('sqlite+aiosqlite:///:memory:', create_schema=True)
    await db.connect()
    yield db
    await db.disconnect()


@pytest.fixture
async def test_db(database) -> AsyncGenerator:
    """
    Async session bound to the test database

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with database.session() as session:
        yield session


@pytest.fixture
def director_repository(test_db):
    from app.database.repositories import DirectorRepository

    return DirectorRepository(test_db)


@pytest.fixture
def movie_repository(test_db):
    from app.database.repositories import MovieRepository

    return MovieRepository(test_db)


@pytest.fixture
def director_service(director_repository, movie_repository, cache):
    from app.services import DirectorService

    return DirectorService(director_repository, movie_repository, cache)


@pytest.fixture
def movie_service(movie_repository, director_repository, director_service, cache):
    from app.services import MovieService

    return MovieService(movie_repository, director_repository, director_service, cache)


@pytest.fixture
async def sample_director(director_repository):
    """Director stored directly through the repository (cache untouched)."""
    return await director_repository.create(**director_data())


@pytest.fixture
async def sample_movie(movie_repository, sample_director):
    """Movie referencing sample_director, stored through the repository."""
    return await movie_repository.create(
        **movie_data(imdb_id="tt0110912", director_id=sample_director.id)
    )


@pytest.fixture
async def client(database, cache) -> AsyncGenerator:
    """
    Create an async HTTP client for testing

    The app gets the test database and the in-memory cache injected.
    Lifespan is not run by ASGITransport; the database is already connected.
    """
    from httpx import AsyncClient, ASGITransport
    from app.main import create_app

    app = create_app(database=database, cache=cache)
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test"
    ) as ac:
        yield ac
