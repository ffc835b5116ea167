"""
Database initialization script

This script creates the database schema and, with --seed, a small set of
sample directors and movies. Sample data goes through the services so the
Redis collection caches are refreshed as well.
"""
import argparse
import asyncio
import logging
import os
import sys
from datetime import date

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.cache.cache_service import CacheService
from app.config import settings
from app.database.connection import Database
from app.database.repositories import DirectorRepository, MovieRepository
from app.services import DirectorService, MovieService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


SAMPLE_DIRECTORS = [
    {
        "first_name": "Quentin",
        "second_name": "Tarantino",
        "birth_date": date(1963, 3, 27),
        "bio": "American filmmaker and actor.",
    },
    {
        "first_name": "Sofia",
        "second_name": "Coppola",
        "birth_date": date(1971, 5, 14),
        "bio": None,
    },
]

SAMPLE_MOVIES = {
    "Tarantino": [
        {
            "title": "Pulp Fiction",
            "description": "The lives of two mob hitmen, a boxer and a pair of diner bandits intertwine.",
            "release_date": date(1994, 10, 14),
            "genre": "Crime",
            "rating": 8.9,
            "imdb_id": "tt0110912",
        },
    ],
    "Coppola": [
        {
            "title": "Lost in Translation",
            "description": "A faded movie star and a neglected young woman form an unlikely bond in Tokyo.",
            "release_date": date(2003, 9, 12),
            "genre": "Drama",
            "rating": 7.7,
            "imdb_id": "tt0335266",
        },
    ],
}


async def seed(database: Database, cache: CacheService) -> None:
    """
    Create sample directors and movies; safe to run repeatedly

    Directors are matched by first and second name, movies by imdbId.

    Args:
        database: Connected database
        cache: Cache service
    """
    async with database.session() as session:
        director_repo = DirectorRepository(session)
        movie_repo = MovieRepository(session)
        directors = DirectorService(director_repo, movie_repo, cache)
        movies = MovieService(movie_repo, director_repo, directors, cache)

        for data in SAMPLE_DIRECTORS:
            existing = await director_repo.get_all(
                first_name=data["first_name"], second_name=data["second_name"]
            )
            if existing:
                director = existing[0]
                logger.info(f"Director {director.first_name} {director.second_name} already exists. Skipping.")
            else:
                director = await directors.create(data)
                logger.info(f"Director created: {director.first_name} {director.second_name} ({director.id})")
            for movie_data in SAMPLE_MOVIES.get(director.second_name, []):
                if await movie_repo.get_by_imdb_id(movie_data["imdb_id"]):
                    logger.info(f"Movie {movie_data['imdb_id']} already exists. Skipping.")
                    continue
                movie = await movies.create({**movie_data, "director_id": director.id})
                logger.info(f"Movie created: {movie.title} ({movie.id})")


async def init_database(with_seed: bool) -> bool:
    """
    Initialize the database with tables and optional sample data
    """
    logger.info("Starting database initialization...")
    database = Database(settings.database_url, echo=settings.DATABASE_ECHO, create_schema=True)
    cache = CacheService(settings.REDIS_URL)
    try:
        await database.connect()
        if with_seed:
            await seed(database, cache)
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return False
    finally:
        await database.disconnect()
        await cache.close()

    logger.info("Database initialization completed successfully!")
    return True


def main():
    """
    Main entry point for database initialization
    """
    parser = argparse.ArgumentParser(description="Create tables (and sample data)")
    parser.add_argument("--seed", action="store_true", help="insert sample directors and movies")
    args = parser.parse_args()

    ok = asyncio.run(init_database(args.seed))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
