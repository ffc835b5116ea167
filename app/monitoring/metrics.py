"""
Prometheus metrics
"""
import time

from fastapi import FastAPI
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi.responses import Response

# HTTP запросы
http_requests_total = Counter(
    'http_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)

# Время обработки запросов
http_request_duration_seconds = Histogram(
    'http_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)

# Обращения к кэшу сущностей
cache_requests_total = Counter(
    'cache_requests_total',
    'Entity cache lookups',
    ['entity', 'result']  # 'hit', 'miss', 'error'
)

# Инвалидации кэша
cache_invalidations_total = Counter(
    'cache_invalidations_total',
    'Entity cache invalidations',
    ['entity', 'scope']  # 'item', 'collection'
)

# Операции над сущностями
entity_mutations_total = Counter(
    'entity_mutations_total',
    'Entity mutations performed by services',
    ['entity', 'operation']
)


def setup_metrics(app: FastAPI):
    """Настройка метрик для FastAPI приложения"""

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        """Endpoint для Prometheus метрик"""
        return Response(
            content=generate_latest(),
            media_type=CONTENT_TYPE_LATEST
        )

    # Middleware для автоматического сбора метрик
    @app.middleware("http")
    async def metrics_middleware(request, call_next):
        """Middleware для сбора метрик HTTP запросов"""
        method = request.method
        path = request.url.path

        # Игнорирование health check и metrics
        if path in ["/health", "/metrics", "/favicon.ico"]:
            return await call_next(request)

        start_time = time.time()
        response = await call_next(request)
        duration = time.time() - start_time

        # Шаблон маршрута вместо пути, чтобы id не раздували кардинальность
        route = request.scope.get("route")
        endpoint = getattr(route, "path", path)

        http_requests_total.labels(
            method=method,
            endpoint=endpoint,
            status_code=response.status_code
        ).inc()

        http_request_duration_seconds.labels(
            method=method,
            endpoint=endpoint
        ).observe(duration)

        return response


def track_cache_lookup(entity: str, result: str):
    """Отслеживание попадания/промаха кэша"""
    cache_requests_total.labels(entity=entity, result=result).inc()


def track_cache_invalidation(entity: str, scope: str):
    """Отслеживание инвалидации кэша"""
    cache_invalidations_total.labels(entity=entity, scope=scope).inc()


def track_mutation(entity: str, operation: str):
    """Отслеживание create/update/delete"""
    entity_mutations_total.labels(entity=entity, operation=operation).inc()
