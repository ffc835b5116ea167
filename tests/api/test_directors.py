"""
Unit tests for directors API endpoints
"""
import pytest
from fastapi import status


DIRECTOR_PAYLOAD = {
    "firstName": "Quentin",
    "secondName": "Tarantino",
    "birthDate": "1963-03-27",
    "bio": "Pulp Fiction, Kill Bill",
}


async def create_director(client, **overrides):
    response = await client.post("/api/v1/directors", json={**DIRECTOR_PAYLOAD, **overrides})
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


class TestDirectorCreate:

    @pytest.mark.asyncio
    async def test_create_director_success(self, client):
        data = await create_director(client)

        assert data["id"]
        assert data["firstName"] == "Quentin"
        assert data["secondName"] == "Tarantino"
        assert data["birthDate"] == "1963-03-27"

    @pytest.mark.asyncio
    async def test_create_director_missing_name(self, client):
        response = await client.post("/api/v1/directors", json={"secondName": "Tarantino"})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_create_director_accepts_snake_case(self, client):
        response = await client.post(
            "/api/v1/directors",
            json={"first_name": "Sofia", "second_name": "Coppola"}
        )
        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["firstName"] == "Sofia"


class TestDirectorRead:

    @pytest.mark.asyncio
    async def test_list_directors_empty(self, client):
        response = await client.get("/api/v1/directors")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_directors_after_create(self, client):
        await client.get("/api/v1/directors")
        created = await create_director(client)

        response = await client.get("/api/v1/directors")
        assert [d["id"] for d in response.json()] == [created["id"]]

    @pytest.mark.asyncio
    async def test_get_director(self, client):
        created = await create_director(client)

        response = await client.get(f"/api/v1/directors/{created['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_get_director_not_found(self, client):
        response = await client.get("/api/v1/directors/missing")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "success": False,
            "error": {
                "code": "NOT_FOUND",
                "message": "Director with ID missing not found."
            }
        }

    @pytest.mark.asyncio
    async def test_get_director_movies(self, client):
        director = await create_director(client)
        await client.post(
            "/api/v1/movies",
            json={
                "title": "Jackie Brown",
                "description": "A flight attendant caught smuggling.",
                "releaseDate": "1997-12-25",
                "genre": "Crime",
                "directorId": director["id"],
            }
        )

        response = await client.get(f"/api/v1/directors/{director['id']}/movies")
        assert response.status_code == status.HTTP_200_OK
        assert [m["title"] for m in response.json()] == ["Jackie Brown"]

    @pytest.mark.asyncio
    async def test_get_movies_of_unknown_director(self, client):
        response = await client.get("/api/v1/directors/missing/movies")
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDirectorUpdate:

    @pytest.mark.asyncio
    async def test_patch_director(self, client):
        created = await create_director(client)

        response = await client.patch(
            f"/api/v1/directors/{created['id']}",
            json={"bio": "Once Upon a Time in Hollywood"}
        )
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["bio"] == "Once Upon a Time in Hollywood"
        assert data["firstName"] == "Quentin"

    @pytest.mark.asyncio
    async def test_put_director_partial(self, client):
        created = await create_director(client)

        response = await client.put(
            f"/api/v1/directors/{created['id']}",
            json={"secondName": "T."}
        )
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["secondName"] == "T."

        fetched = await client.get(f"/api/v1/directors/{created['id']}")
        assert fetched.json()["secondName"] == "T."

    @pytest.mark.asyncio
    async def test_update_director_empty_body(self, client):
        created = await create_director(client)

        response = await client.patch(f"/api/v1/directors/{created['id']}", json={})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_update_director_not_found(self, client):
        response = await client.patch("/api/v1/directors/missing", json={"bio": "x"})
        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDirectorDelete:

    @pytest.mark.asyncio
    async def test_delete_director(self, client):
        created = await create_director(client)

        response = await client.delete(f"/api/v1/directors/{created['id']}")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Director deleted successfully"}

        response = await client.get(f"/api/v1/directors/{created['id']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_director_with_movies_conflict(self, client):
        director = await create_director(client)
        await client.post(
            "/api/v1/movies",
            json={
                "title": "Kill Bill",
                "description": "A bride seeks revenge.",
                "releaseDate": "2003-10-10",
                "genre": "Action",
                "directorId": director["id"],
            }
        )

        response = await client.delete(f"/api/v1/directors/{director['id']}")

        assert response.status_code == status.HTTP_409_CONFLICT
        error = response.json()["error"]
        assert error["code"] == "CONFLICT"
        assert "1 movies are associated" in error["message"]

    @pytest.mark.asyncio
    async def test_delete_director_not_found(self, client):
        response = await client.delete("/api/v1/directors/missing")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_with_cache_down_is_internal_error(self, client, cache):
        created = await create_director(client)
        cache.failing.add("delete")

        response = await client.delete(f"/api/v1/directors/{created['id']}")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
