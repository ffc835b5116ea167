"""
Fixtures for integration tests

These tests need a running Redis (docker-compose up redis) and are
deselected by default; run them with ``pytest -m integration``.
"""
import os

import pytest


@pytest.fixture(scope="session")
def redis_url():
    """Get Redis URL from environment or use default for testing"""
    return os.getenv("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest.fixture
async def cache_service(redis_url):
    """
    Real CacheService bound to a scratch Redis database

    The database is flushed before and after each test.
    """
    from app.cache.cache_service import CacheService

    service = CacheService(redis_url, default_ttl=60)
    service._redis.flushdb()

    yield service

    service._redis.flushdb()
    await service.close()
