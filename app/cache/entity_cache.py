"""
Read-through cache and invalidation policy shared by entity services.
"""
import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as SchemaError

from app.cache.cache_service import CacheService
from app.cache.exceptions import CacheError
from app.cache.keys import CacheKeys
from app.monitoring.metrics import track_cache_invalidation, track_cache_lookup

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)


class EntityCache(Generic[E]):
    """
    Кэш сущностей одного типа поверх CacheService.

    Failure policy:
        - reads (get_*) and populate-on-miss writes (set_*) fail open:
          a Redis error or an entry that does not match the schema is
          logged and treated as a miss;
        - invalidation and post-mutation refresh fail loud: CacheError
          propagates, since a lost invalidation would leave stale data.

    Entries are stored as JSON produced by ``model_dump(mode="json")``.
    """

    def __init__(
        self,
        cache: CacheService,
        keys: CacheKeys,
        schema: Type[E],
        ttl: Optional[int] = None,
    ) -> None:
        self.cache = cache
        self.keys = keys
        self.schema = schema
        self.ttl = ttl or cache.default_ttl
        self._collection_adapter = TypeAdapter(List[schema])

    @property
    def entity(self) -> str:
        return self.keys.entity_type

    async def _read(self, key: str, decode: Callable[[Any], Any]) -> Optional[Any]:
        try:
            value = await self.cache.get(key)
        except CacheError as e:
            logger.warning(
                "Cache read failed, treating as miss: %s", e,
                extra={"entity": self.entity, "cache_key": key},
            )
            track_cache_lookup(self.entity, "error")
            return None
        if value is None:
            track_cache_lookup(self.entity, "miss")
            return None
        try:
            decoded = decode(value)
        except SchemaError as e:
            # Entry written with another schema; the store is authoritative
            logger.warning(
                "Malformed cache entry, treating as miss: %s", e,
                extra={"entity": self.entity, "cache_key": key},
            )
            track_cache_lookup(self.entity, "error")
            return None
        track_cache_lookup(self.entity, "hit")
        logger.debug("Cache hit", extra={"entity": self.entity, "cache_key": key})
        return decoded

    async def _populate(self, key: str, value: object) -> None:
        try:
            await self.cache.set(key, value, self.ttl)
        except CacheError as e:
            logger.warning(
                "Cache populate failed: %s", e,
                extra={"entity": self.entity, "cache_key": key},
            )

    async def get_item(self, entity_id: str) -> Optional[E]:
        """Сущность из кэша или None."""
        return await self._read(self.keys.item(entity_id), self.schema.model_validate)

    async def set_item(self, entity: E) -> None:
        await self._populate(
            self.keys.item(getattr(entity, "id")),
            entity.model_dump(mode="json"),
        )

    async def get_collection(self) -> Optional[List[E]]:
        """Вся коллекция из кэша или None."""
        return await self._read(self.keys.collection, self._collection_adapter.validate_python)

    async def set_collection(self, entities: Sequence[E]) -> None:
        await self._populate(
            self.keys.collection,
            [entity.model_dump(mode="json") for entity in entities],
        )

    async def invalidate_item(self, entity_id: str) -> None:
        """Удаление ключа сущности (до изменения в БД)."""
        await self.cache.delete(self.keys.item(entity_id))
        track_cache_invalidation(self.entity, "item")

    async def invalidate_collection(self) -> None:
        """Удаление ключа коллекции и всех ключей по шаблону типа."""
        await self.cache.delete(self.keys.collection)
        await self.cache.delete_pattern(self.keys.pattern)
        track_cache_invalidation(self.entity, "collection")

    async def refresh_collection(self, loader: Callable[[], Awaitable[List[E]]]) -> List[E]:
        """
        Invalidate, reload from the store and rewrite the collection key.

        Called after a successful mutation so the collection view reflects
        it. There is no locking: concurrent refreshes race and the last one
        to write wins, which may be a snapshot taken before another
        concurrent write completed. The entry expires after the TTL.

        Args:
            loader: Coroutine function returning the full collection from the store

        Returns:
            The freshly loaded collection
        """
        await self.invalidate_collection()
        entities = await loader()
        await self.cache.set(
            self.keys.collection,
            [entity.model_dump(mode="json") for entity in entities],
            self.ttl,
        )
        return entities
