"""
Movies API: create, list, get, update, delete
"""
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_movie_service
from app.schemas.movie import Movie, MovieCreate, MovieUpdate, MovieView
from app.services.movie_service import MovieService

router = APIRouter()


@router.post("", response_model=Movie, status_code=status.HTTP_201_CREATED)
async def create_movie(
    body: MovieCreate,
    service: MovieService = Depends(get_movie_service),
):
    """Создание фильма (режиссёр должен существовать)."""
    return await service.create(body.model_dump())


@router.get("", response_model=Union[List[MovieView], List[Movie]])
async def list_movies(
    expand: Optional[str] = Query(None, description="Use 'director' to embed director data"),
    service: MovieService = Depends(get_movie_service),
):
    """Список всех фильмов."""
    if expand == "director":
        return await service.get_all_views()
    return await service.get_all()


@router.get("/{movie_id}", response_model=Union[MovieView, Movie])
async def get_movie(
    movie_id: str,
    expand: Optional[str] = Query(None, description="Use 'director' to embed director data"),
    service: MovieService = Depends(get_movie_service),
):
    """Фильм по ID."""
    if expand == "director":
        return await service.get_view_by_id(movie_id)
    return await service.get_by_id(movie_id)


@router.api_route("/{movie_id}", methods=["PUT", "PATCH"], response_model=Movie)
async def update_movie(
    movie_id: str,
    body: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
):
    """Частичное обновление фильма."""
    return await service.update(movie_id, body.model_dump(exclude_unset=True))


@router.delete("/{movie_id}")
async def delete_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
):
    """Удаление фильма."""
    await service.delete(movie_id)
    return {"message": "Movie deleted successfully"}
