"""
Director model
"""
from datetime import date
from typing import Optional

from sqlalchemy import Date, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database.models.base import BaseModel


class Director(BaseModel):
    """
    Director model
    
    Attributes:
        id: Primary key (opaque string)
        first_name: First name
        second_name: Second (family) name
        birth_date: Optional birth date
        bio: Optional biography
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """
    
    __tablename__ = "directors"
    
    first_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    second_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    birth_date: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True
    )
    bio: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    
    def __repr__(self) -> str:
        return f"<Director(id={self.id}, name='{self.first_name} {self.second_name}')>"
