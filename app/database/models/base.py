"""
Base model for all SQLAlchemy models
"""
import uuid
from datetime import datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def generate_id() -> str:
    """Opaque identifier assigned by the store on insert."""
    return uuid.uuid4().hex


class BaseModel(DeclarativeBase):
    """Base model with common fields for all models"""
    
    id: Mapped[str] = mapped_column(
        String(32),
        primary_key=True,
        default=generate_id
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, 
        default=datetime.utcnow, 
        server_default=func.now(),
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, 
        default=datetime.utcnow, 
        onupdate=datetime.utcnow,
        server_default=func.now(),
        nullable=False
    )
