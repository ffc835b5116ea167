"""
End-to-end service scenarios for store/cache consistency
"""
import pytest

from app.services.exceptions import ConflictError, NotFoundError, ValidationError
from tests.factories import director_data, movie_data


async def test_created_movie_appears_in_collection(movie_service):
    await movie_service.get_all()

    m1 = await movie_service.create(movie_data(title="M1"))

    assert m1.id in {m.id for m in await movie_service.get_all()}


async def test_collection_reflects_every_mutation(movie_service, sample_director):
    await movie_service.get_all()

    movie = await movie_service.create(movie_data(director_id=sample_director.id))
    assert [m.title for m in await movie_service.get_all()] == ["Pulp Fiction"]

    await movie_service.update(movie.id, {"genre": "Neo-noir"})
    assert [m.genre for m in await movie_service.get_all()] == ["Neo-noir"]

    await movie_service.delete(movie.id)
    assert await movie_service.get_all() == []


async def test_director_with_movie_lifecycle(director_service, movie_service):
    """Режиссёр с фильмом: 409, затем удаление фильма и режиссёра."""
    director = await director_service.create(director_data(birth_date=None))
    movie = await movie_service.create(movie_data(title="X", director_id=director.id))

    with pytest.raises(ConflictError, match="1 movies"):
        await director_service.delete(director.id)

    assert await movie_service.delete(movie.id) is True
    assert await director_service.delete(director.id) is True

    with pytest.raises(NotFoundError):
        await director_service.get_by_id(director.id)
    assert await director_service.get_all() == []


async def test_duplicate_imdb_id_keeps_first_movie(movie_service):
    first = await movie_service.create(movie_data(title="First", imdb_id="tt0001"))

    with pytest.raises(ValidationError):
        await movie_service.create(movie_data(title="Second", imdb_id="tt0001"))

    assert await movie_service.get_by_id(first.id) == first
    assert [m.title for m in await movie_service.get_all()] == ["First"]


async def test_director_update_does_not_touch_movie_cache(director_service, movie_service, cache, sample_movie):
    await movie_service.get_all()
    await movie_service.get_by_id(sample_movie.id)

    await director_service.update(sample_movie.director_id, {"bio": "updated"})

    assert "movies:all" in cache.store
    assert f"movie:{sample_movie.id}" in cache.store


async def test_view_reflects_director_update(director_service, movie_service, sample_movie):
    await movie_service.get_view_by_id(sample_movie.id)

    await director_service.update(sample_movie.director_id, {"first_name": "Q."})

    view = await movie_service.get_view_by_id(sample_movie.id)
    assert view.director.first_name == "Q."
