"""
Database repositories
"""
from app.database.repositories.base import BaseRepository
from app.database.repositories.director_repository import DirectorRepository
from app.database.repositories.movie_repository import MovieRepository

__all__ = [
    "BaseRepository",
    "DirectorRepository",
    "MovieRepository",
]
