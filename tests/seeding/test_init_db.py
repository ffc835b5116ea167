"""
Tests for the database seeding script
"""
import pytest

from app.database.repositories import DirectorRepository, MovieRepository
from scripts.init_db import SAMPLE_DIRECTORS, SAMPLE_MOVIES, seed


@pytest.mark.asyncio
class TestSeed:

    async def test_seed_creates_sample_data(self, database, cache):
        await seed(database, cache)

        async with database.session() as session:
            directors = await DirectorRepository(session).get_all()
            movies = await MovieRepository(session).get_all()

        assert len(directors) == len(SAMPLE_DIRECTORS)
        assert len(movies) == sum(len(m) for m in SAMPLE_MOVIES.values())

    async def test_seed_twice_does_not_duplicate(self, database, cache):
        await seed(database, cache)
        await seed(database, cache)

        async with database.session() as session:
            directors = await DirectorRepository(session).get_all()
            movies = await MovieRepository(session).get_all()

        assert sorted(d.second_name for d in directors) == ["Coppola", "Tarantino"]
        by_director = {d.second_name: d.id for d in directors}
        assert {m.title: m.director_id for m in movies} == {
            "Pulp Fiction": by_director["Tarantino"],
            "Lost in Translation": by_director["Coppola"],
        }
