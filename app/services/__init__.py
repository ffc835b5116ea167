"""
Business logic services
"""
from app.services.director_service import DirectorService
from app.services.movie_service import MovieService
from app.services.exceptions import (
    AppError,
    ConflictError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DirectorService",
    "MovieService",
    "AppError",
    "ConflictError",
    "NotFoundError",
    "ValidationError",
]
