"""
Database models
"""
from app.database.models.base import BaseModel
from app.database.models.director import Director
from app.database.models.movie import Movie

__all__ = [
    "BaseModel",
    "Director",
    "Movie",
]
