"""
Directors API: create, list, get, update, delete, movies of a director
"""
from typing import List

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_director_service
from app.schemas.director import Director, DirectorCreate, DirectorUpdate
from app.schemas.movie import Movie
from app.services.director_service import DirectorService

router = APIRouter()


@router.post("", response_model=Director, status_code=status.HTTP_201_CREATED)
async def create_director(
    body: DirectorCreate,
    service: DirectorService = Depends(get_director_service),
):
    """Создание режиссёра."""
    return await service.create(body.model_dump())


@router.get("", response_model=List[Director])
async def list_directors(
    service: DirectorService = Depends(get_director_service),
):
    """Список всех режиссёров."""
    return await service.get_all()


@router.get("/{director_id}", response_model=Director)
async def get_director(
    director_id: str,
    service: DirectorService = Depends(get_director_service),
):
    """Режиссёр по ID."""
    return await service.get_by_id(director_id)


@router.get("/{director_id}/movies", response_model=List[Movie])
async def list_director_movies(
    director_id: str,
    service: DirectorService = Depends(get_director_service),
):
    """Фильмы режиссёра."""
    return await service.get_movies(director_id)


@router.api_route("/{director_id}", methods=["PUT", "PATCH"], response_model=Director)
async def update_director(
    director_id: str,
    body: DirectorUpdate,
    service: DirectorService = Depends(get_director_service),
):
    """Частичное обновление режиссёра."""
    return await service.update(director_id, body.model_dump(exclude_unset=True))


@router.delete("/{director_id}")
async def delete_director(
    director_id: str,
    service: DirectorService = Depends(get_director_service),
):
    """Удаление режиссёра (409 если есть связанные фильмы)."""
    await service.delete(director_id)
    return {"message": "Director deleted successfully"}
