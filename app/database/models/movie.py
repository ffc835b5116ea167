"""
Movie model
"""
from datetime import date
from typing import Optional

from sqlalchemy import Date, Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database.models.base import BaseModel


class Movie(BaseModel):
    """
    Movie model
    
    director_id is a plain indexed column without a database foreign key:
    the director reference is checked by MovieService, and director
    deletion is guarded by DirectorService.
    
    Attributes:
        id: Primary key (opaque string)
        title: Movie title
        description: Movie description
        release_date: Release date
        genre: Genre
        rating: Optional rating in [0, 10]
        imdb_id: Optional unique external identifier
        director_id: Optional reference to a director
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """
    
    __tablename__ = "movies"
    
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    description: Mapped[str] = mapped_column(
        Text,
        nullable=False
    )
    release_date: Mapped[date] = mapped_column(
        Date,
        nullable=False
    )
    genre: Mapped[str] = mapped_column(
        String(100),
        nullable=False
    )
    rating: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True
    )
    imdb_id: Mapped[Optional[str]] = mapped_column(
        String(32),
        unique=True,
        nullable=True
    )
    director_id: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True
    )
    
    # Indexes
    __table_args__ = (
        Index("ix_movies_director_id", "director_id"),
        Index("ix_movies_genre", "genre"),
    )
    
    def __repr__(self) -> str:
        return f"<Movie(id={self.id}, title='{self.title}', director_id={self.director_id})>"
