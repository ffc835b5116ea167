"""
Test data builders
"""
from datetime import date
from typing import Any, Dict


def director_data(**overrides: Any) -> Dict[str, Any]:
    data = {
        "first_name": "Quentin",
        "second_name": "Tarantino",
        "birth_date": date(1963, 3, 27),
        "bio": None,
    }
    data.update(overrides)
    return data


def movie_data(**overrides: Any) -> Dict[str, Any]:
    data = {
        "title": "Pulp Fiction",
        "description": "Two hitmen, a boxer and a pair of diner bandits.",
        "release_date": date(1994, 10, 14),
        "genre": "Crime",
        "rating": 8.9,
        "imdb_id": None,
        "director_id": None,
    }
    data.update(overrides)
    return data
