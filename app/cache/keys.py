"""
Cache key scheme for entity caches.
"""


class CacheKeys:
    """Ключи кэша для одного типа сущности.

    item:       "<type>:<id>"
    collection: "<type>s:all"
    pattern:    "<type>:*"

    The collection key uses the plural prefix, so the wildcard pattern
    never matches it.
    """

    def __init__(self, entity_type: str) -> None:
        if not entity_type or ":" in entity_type or "*" in entity_type:
            raise ValueError(f"Invalid entity type for cache keys: {entity_type!r}")
        self.entity_type = entity_type

    def item(self, entity_id: str) -> str:
        return f"{self.entity_type}:{entity_id}"

    @property
    def collection(self) -> str:
        return f"{self.entity_type}s:all"

    @property
    def pattern(self) -> str:
        return f"{self.entity_type}:*"


DIRECTOR_KEYS = CacheKeys("director")
MOVIE_KEYS = CacheKeys("movie")
