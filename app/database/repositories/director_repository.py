"""
Director repository
"""
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models.director import Director as DirectorModel
from app.database.repositories.base import BaseRepository
from app.schemas.director import Director


class DirectorRepository(BaseRepository[DirectorModel, Director]):
    """
    Repository for Director model operations
    """
    
    def __init__(self, session: AsyncSession):
        """
        Initialize DirectorRepository
        
        Args:
            session: Async database session
        """
        super().__init__(DirectorModel, Director, session)
