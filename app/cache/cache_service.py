"""
Redis-backed cache service.
"""
import asyncio
import json
import logging
from typing import Any, List, Optional

from redis import Redis
from redis.exceptions import RedisError

from app.cache.exceptions import CacheError
from app.config import get_settings

logger = logging.getLogger(__name__)
_settings = get_settings()


class CacheService:
    """Сервис кэширования на Redis (sync Redis, вызовы в executor).

    Every transport failure is raised as CacheError; whether a failure is
    tolerated is decided by the caller (see EntityCache).
    """

    def __init__(self, url: Optional[str] = None, default_ttl: Optional[int] = None) -> None:
        self._redis = Redis.from_url(url or _settings.REDIS_URL)
        self.default_ttl = default_ttl or _settings.CACHE_TTL_SECONDS

    def _run(self, fn: Any, *args: Any, **kwargs: Any) -> Any:
        return asyncio.get_running_loop().run_in_executor(
            None, lambda: fn(*args, **kwargs)
        )

    async def get(self, key: str) -> Optional[Any]:
        """Получение значения из кэша (None при промахе)."""
        try:
            value = await self._run(self._redis.get, key)
        except RedisError as e:
            raise CacheError(f"Cache get failed for key={key}: {e}") from e
        if value is None:
            return None
        try:
            return json.loads(value)
        except ValueError as e:
            raise CacheError(f"Corrupt cache entry key={key}: {e}") from e

    async def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[int] = None,
    ) -> bool:
        """Установка значения в кэш с TTL."""
        ttl = ttl or self.default_ttl
        serialized = json.dumps(value)
        try:
            await self._run(self._redis.setex, key, ttl, serialized)
        except RedisError as e:
            raise CacheError(f"Cache set failed for key={key}: {e}") from e
        return True

    async def delete(self, key: str) -> bool:
        """Удаление значения из кэша."""
        try:
            await self._run(self._redis.delete, key)
        except RedisError as e:
            raise CacheError(f"Cache delete failed for key={key}: {e}") from e
        return True

    async def delete_pattern(self, pattern: str) -> int:
        """Удаление всех ключей по glob-шаблону (SCAN + DEL)."""

        def _delete_matching() -> int:
            keys: List[Any] = list(self._redis.scan_iter(match=pattern))
            if not keys:
                return 0
            return self._redis.delete(*keys)

        try:
            deleted = await self._run(_delete_matching)
        except RedisError as e:
            raise CacheError(f"Cache pattern delete failed for pattern={pattern}: {e}") from e
        logger.debug("Deleted %s keys matching %s", deleted, pattern)
        return deleted

    async def ping(self) -> bool:
        """Проверка доступности Redis."""
        try:
            return bool(await self._run(self._redis.ping))
        except RedisError as e:
            logger.warning("Cache ping failed: %s", e)
            return False

    async def close(self) -> None:
        """Закрытие пула соединений."""
        await self._run(self._redis.close)
