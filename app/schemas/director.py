"""
Director schemas: domain entity and API request bodies
"""
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel


class DirectorCreate(BaseModel):
    """Тело запроса создания режиссёра."""

    first_name: str = Field(..., min_length=1, description="First name is required")
    second_name: str = Field(..., min_length=1, description="Second name is required")
    birth_date: Optional[date] = None
    bio: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class DirectorUpdate(BaseModel):
    """Частичное обновление режиссёра (хотя бы одно поле)."""

    first_name: Optional[str] = Field(None, min_length=1)
    second_name: Optional[str] = Field(None, min_length=1)
    birth_date: Optional[date] = None
    bio: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @model_validator(mode="after")
    def check_not_empty(self) -> "DirectorUpdate":
        if not self.model_fields_set:
            raise ValueError("Update data must contain at least one field")
        for name in ("first_name", "second_name"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} must not be null")
        return self


class Director(BaseModel):
    """Режиссёр в том виде, в каком его хранят БД и кэш."""

    id: str
    first_name: str
    second_name: str
    birth_date: Optional[date] = None
    bio: Optional[str] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
