"""
Cache-related exceptions
"""


class CacheError(Exception):
    """Ошибка транспорта Redis при записи или инвалидации."""

    pass
