"""
Movie repository for movie-related database operations
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models.movie import Movie as MovieModel
from app.database.repositories.base import BaseRepository
from app.schemas.movie import Movie


class MovieRepository(BaseRepository[MovieModel, Movie]):
    """
    Repository for Movie model operations
    """
    
    def __init__(self, session: AsyncSession):
        """
        Initialize MovieRepository
        
        Args:
            session: Async database session
        """
        super().__init__(MovieModel, Movie, session)
    
    async def get_by_director_id(self, director_id: str) -> List[Movie]:
        """
        Get movies referencing a director
        
        Args:
            director_id: Director ID
            
        Returns:
            List of movie entities
        """
        stmt = select(MovieModel).where(MovieModel.director_id == director_id)
        stmt = stmt.order_by(MovieModel.created_at.asc(), MovieModel.id.asc())
        
        result = await self.session.execute(stmt)
        return [self._to_entity(obj) for obj in result.scalars().all()]
    
    async def get_by_imdb_id(self, imdb_id: str) -> Optional[Movie]:
        """
        Get movie by its external IMDb identifier
        
        Args:
            imdb_id: IMDb ID (e.g. "tt0110912")
            
        Returns:
            Movie entity or None if not found
        """
        stmt = select(MovieModel).where(MovieModel.imdb_id == imdb_id)
        result = await self.session.execute(stmt)
        obj = result.scalar_one_or_none()
        return self._to_entity(obj) if obj is not None else None
