"""
Pydantic schemas for API and services
"""
from app.schemas.director import Director, DirectorCreate, DirectorUpdate
from app.schemas.movie import Movie, MovieCreate, MovieUpdate, MovieView, to_movie_view

__all__ = [
    "Director",
    "DirectorCreate",
    "DirectorUpdate",
    "Movie",
    "MovieCreate",
    "MovieUpdate",
    "MovieView",
    "to_movie_view",
]
