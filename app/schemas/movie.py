"""
Movie schemas: domain entity, read model and API request bodies
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from app.schemas.director import Director


class MovieCreate(BaseModel):
    """Тело запроса создания фильма."""

    title: str = Field(..., min_length=1, description="Title is required")
    description: str = Field(..., min_length=1, description="Description is required")
    release_date: date
    genre: str = Field(..., min_length=1, description="Genre is required")
    rating: Optional[float] = Field(None, ge=0, le=10)
    imdb_id: Optional[str] = Field(None, min_length=1)
    director_id: Optional[str] = Field(None, min_length=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class MovieUpdate(BaseModel):
    """
    Частичное обновление фильма.

    Only fields present in the request body are applied; directorId,
    rating and imdbId may be set to null to clear them.
    """

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    release_date: Optional[date] = None
    genre: Optional[str] = Field(None, min_length=1)
    rating: Optional[float] = Field(None, ge=0, le=10)
    imdb_id: Optional[str] = Field(None, min_length=1)
    director_id: Optional[str] = Field(None, min_length=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @model_validator(mode="after")
    def check_not_empty(self) -> "MovieUpdate":
        if not self.model_fields_set:
            raise ValueError("Update data must contain at least one field")
        for name in ("title", "description", "release_date", "genre"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} must not be null")
        return self


class Movie(BaseModel):
    """Фильм в том виде, в каком его хранят БД и кэш."""

    id: str
    title: str
    description: str
    release_date: date
    genre: str
    rating: Optional[float] = None
    imdb_id: Optional[str] = None
    director_id: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class MovieView(Movie):
    """Фильм с вложенным снимком режиссёра (только для чтения)."""

    director: Optional[Director]


def to_movie_view(movie: Movie, director: Optional[Director] = None) -> MovieView:
    """Project a stored movie and its director snapshot into the read model."""
    return MovieView(**movie.model_dump(), director=director)
