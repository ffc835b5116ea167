"""
Cache layer: Redis-backed cache service, key scheme and entity caches.
"""
from app.cache.cache_service import CacheService
from app.cache.entity_cache import EntityCache
from app.cache.exceptions import CacheError
from app.cache.keys import CacheKeys, DIRECTOR_KEYS, MOVIE_KEYS

__all__ = [
    "CacheService",
    "EntityCache",
    "CacheError",
    "CacheKeys",
    "DIRECTOR_KEYS",
    "MOVIE_KEYS",
]
