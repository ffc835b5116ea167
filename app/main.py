"""
Главное приложение FastAPI
"""
from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app.api.v1.router import api_router
from app.cache.cache_service import CacheService
from app.config import settings
from app.database.connection import Database
from app.logging_config import setup_logging
from app.middleware.logging_middleware import LoggingMiddleware
from app.monitoring.metrics import setup_metrics
from app.services.exceptions import AppError


setup_logging(use_json=settings.LOG_JSON, level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan события приложения"""
    # Запуск
    logger.info("Starting Movie Director API...")
    await app.state.database.connect()
    logger.info("Database initialized")

    yield

    # Остановка
    logger.info("Shutting down Movie Director API...")
    await app.state.database.disconnect()
    await app.state.cache.close()
    logger.info("Database and cache connections closed")


def error_body(code: str, message: str) -> dict:
    return {
        "success": False,
        "error": {
            "code": code,
            "message": message
        }
    }


def create_app(
    database: Optional[Database] = None,
    cache: Optional[CacheService] = None,
) -> FastAPI:
    """
    Build the application with its store and cache clients.

    Both clients are created here (or injected, e.g. by tests), kept on
    ``app.state`` and handed to services through dependencies.
    """
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="REST API для управления фильмами и режиссёрами с кэшированием в Redis",
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan
    )
    app.state.database = database or Database(settings.database_url, echo=settings.DATABASE_ECHO)
    app.state.cache = cache or CacheService(settings.REDIS_URL, settings.CACHE_TTL_SECONDS)

    # CORS Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Gzip Middleware
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Custom Middleware
    app.add_middleware(LoggingMiddleware)

    # Настройка метрик
    if settings.ENABLE_METRICS:
        setup_metrics(app)

    # Обработка исключений
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        """Ошибки бизнес-логики -> HTTP статус ошибки"""
        logger.warning(f"{type(exc).__name__}: {exc.message} (Status: {exc.status_code})")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.code, exc.message)
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Глобальный обработчик исключений"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body(
                "INTERNAL_ERROR",
                "An unexpected error occurred." if not settings.DEBUG else str(exc)
            )
        )

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Проверка здоровья приложения"""
        return {
            "status": "healthy",
            "service": settings.PROJECT_NAME,
            "version": settings.VERSION
        }

    # API Routes
    app.include_router(api_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root():
        """Корневой endpoint"""
        return {
            "message": "Movie Director API",
            "version": settings.VERSION,
            "docs": "/docs" if settings.DEBUG else "disabled",
            "health": "/health"
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else 4
    )
