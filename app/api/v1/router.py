"""
API v1 Router
"""
from fastapi import APIRouter

from app.api.v1.directors import router as directors_router
from app.api.v1.health import router as health_router
from app.api.v1.movies import router as movies_router

api_router = APIRouter()

# Подключение роутеров
api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(directors_router, prefix="/directors", tags=["Directors"])
api_router.include_router(movies_router, prefix="/movies", tags=["Movies"])
