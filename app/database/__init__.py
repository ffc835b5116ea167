"""
Database package
"""
from app.database.connection import Database
from app.database.models import BaseModel, Director, Movie
from app.database.repositories import (
    BaseRepository,
    DirectorRepository,
    MovieRepository,
)

__all__ = [
    # Connection
    "Database",
    # Models
    "BaseModel",
    "Director",
    "Movie",
    # Repositories
    "BaseRepository",
    "DirectorRepository",
    "MovieRepository",
]
