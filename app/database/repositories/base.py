"""
Base repository for common database operations
"""
from typing import Any, Generic, List, Optional, Type, TypeVar

from pydantic import BaseModel as Schema
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)
E = TypeVar("E", bound=Schema)


class BaseRepository(Generic[T, E]):
    """
    Base repository with CRUD operations
    
    Implements the persistence port used by services: every method
    returns pydantic entities (never ORM instances), and every mutation
    is committed immediately, so a write is durable on its own.
    """
    
    def __init__(self, model: Type[T], schema: Type[E], session: AsyncSession):
        """
        Initialize repository with model, entity schema and session
        
        Args:
            model: SQLAlchemy model class
            schema: Pydantic entity class returned to callers
            session: Async database session
        """
        self.model = model
        self.schema = schema
        self.session = session
    
    def _to_entity(self, obj: T) -> E:
        return self.schema.model_validate(obj)
    
    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise

    async def _get(self, id: str) -> Optional[T]:
        stmt = select(self.model).where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
    
    async def create(self, **kwargs: Any) -> E:
        """
        Create a new record
        
        Args:
            **kwargs: Model field values
            
        Returns:
            Created entity with its assigned id

        Raises:
            IntegrityError: A unique constraint was violated; the session
                is rolled back and stays usable
        """
        obj = self.model(**kwargs)
        self.session.add(obj)
        await self._commit()
        await self.session.refresh(obj)
        return self._to_entity(obj)
    
    async def get_by_id(self, id: str) -> Optional[E]:
        """
        Get record by ID
        
        Args:
            id: Record ID
            
        Returns:
            Entity or None if not found
        """
        obj = await self._get(id)
        return self._to_entity(obj) if obj is not None else None
    
    async def get_all(self, **filters: Any) -> List[E]:
        """
        Get all records, optionally filtered by field equality
        
        Args:
            **filters: Field filters
            
        Returns:
            List of entities, oldest first
        """
        stmt = select(self.model)
        
        # Apply filters
        for key, value in filters.items():
            if hasattr(self.model, key):
                stmt = stmt.where(getattr(self.model, key) == value)
        
        stmt = stmt.order_by(self.model.created_at.asc(), self.model.id.asc())
        
        result = await self.session.execute(stmt)
        return [self._to_entity(obj) for obj in result.scalars().all()]
    
    async def update_by_id(self, id: str, **kwargs: Any) -> Optional[E]:
        """
        Update a record by ID
        
        Args:
            id: Record ID
            **kwargs: Fields to update
            
        Returns:
            Updated entity or None if not found
        """
        obj = await self._get(id)
        if obj is None:
            return None
        
        for key, value in kwargs.items():
            if hasattr(obj, key):
                setattr(obj, key, value)

        await self._commit()
        await self.session.refresh(obj)
        return self._to_entity(obj)
    
    async def delete_by_id(self, id: str) -> bool:
        """
        Delete a record by ID
        
        Args:
            id: Record ID
            
        Returns:
            True if deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0
    
    async def count(self, **filters: Any) -> int:
        """
        Count records matching filters
        
        Args:
            **filters: Field filters
            
        Returns:
            Number of matching records
        """
        stmt = select(func.count(self.model.id))
        
        for key, value in filters.items():
            if hasattr(self.model, key):
                stmt = stmt.where(getattr(self.model, key) == value)
        
        result = await self.session.execute(stmt)
        return result.scalar() or 0
    
    async def exists(self, id: str) -> bool:
        """
        Check if a record exists by ID
        
        Args:
            id: Record ID
            
        Returns:
            True if record exists
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none() is not None
