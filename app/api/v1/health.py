"""
Health check endpoints
"""
from fastapi import APIRouter, Depends

from app.api.dependencies import get_cache
from app.cache.cache_service import CacheService

router = APIRouter()


@router.get("/")
async def health_check(cache: CacheService = Depends(get_cache)):
    """Проверка здоровья приложения и доступности кэша"""
    cache_ok = await cache.ping()
    return {
        "success": True,
        "status": "healthy",
        "cache": "up" if cache_ok else "down",
        "message": "Movie Director API is running"
    }
