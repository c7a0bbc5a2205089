"""
Integration tests for the movie workflows.

Drives the ASGI app over HTTP with the movie repository patched.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, patch
from uuid import uuid4

import pytest

from cinedex.core.ordering import OrderClause, OrderDirection, parse_order
from cinedex.core.pagination import PaginationMetadata
from cinedex.models.orm import Actor, Director, Movie, MovieActor, MovieDirector
from cinedex.repositories.movie import MovieRepository


def make_movie(title: str, **kwargs) -> Movie:
    now = datetime.now(UTC)
    return Movie(id=uuid4(), title=title, created_at=now, updated_at=now, **kwargs)


@pytest.mark.integration
class TestListMovies:
    """Tests for GET /api/movies."""

    async def test_returns_data_envelope(self, client):
        movies = [make_movie("Heat"), make_movie("Ronin")]
        list_entities = AsyncMock(return_value=movies)

        with patch.object(MovieRepository, "list_entities", list_entities):
            response = await client.get("/api/movies")

        assert response.status_code == 200
        data = response.json()
        assert [m["title"] for m in data["data"]] == ["Heat", "Ronin"]
        assert "releaseDate" in data["data"][0]
        list_entities.assert_awaited_once_with(order=None, limit=None, offset=None)

    async def test_passes_limit_offset_and_order(self, client):
        list_entities = AsyncMock(return_value=[])

        with patch.object(MovieRepository, "list_entities", list_entities):
            response = await client.get(
                "/api/movies",
                params={"limit": 5, "offset": 10, "orderBy": "title,-releaseDate"},
            )

        assert response.status_code == 200
        list_entities.assert_awaited_once_with(
            order=parse_order("title,-releaseDate"), limit=5, offset=10
        )

    async def test_unknown_order_field_is_rejected(self, client):
        list_entities = AsyncMock(return_value=[])

        with patch.object(MovieRepository, "list_entities", list_entities):
            response = await client.get("/api/movies", params={"orderBy": "title,-rating"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "validation_error"
        assert "rating" in body["message"]
        list_entities.assert_not_awaited()

    @pytest.mark.parametrize("params", [{"limit": 0}, {"offset": -1}, {"orderBy": ""}])
    async def test_invalid_query_parameters(self, client, params):
        response = await client.get("/api/movies", params=params)

        assert response.status_code == 422


@pytest.mark.integration
class TestMovieCatalog:
    """Tests for GET /api/movies/catalog."""

    async def test_returns_meta_and_records_with_cast(self, client):
        movie = make_movie("Heat")
        movie.actor_links.append(MovieActor(actor=Actor(id=uuid4(), name="Al Pacino")))
        movie.actor_links.append(MovieActor(actor=Actor(id=uuid4(), name="Robert De Niro")))
        movie.director_links.append(
            MovieDirector(director=Director(id=uuid4(), name="Michael Mann"))
        )
        meta = PaginationMetadata(
            page_size=1, page_no=2, total_count=3, total_pages=3, has_next=True, has_prev=True
        )
        get_page = AsyncMock(return_value=([movie], meta))

        with patch.object(MovieRepository, "get_page", get_page):
            response = await client.get(
                "/api/movies/catalog",
                params={"pageSize": 1, "pageNo": 2, "orderBy": "-releaseDate"},
            )

        assert response.status_code == 200
        data = response.json()
        assert data["meta"] == {
            "pageSize": 1,
            "pageNo": 2,
            "totalCount": 3,
            "totalPages": 3,
            "hasNext": True,
            "hasPrev": True,
        }
        (record,) = data["records"]
        assert [a["name"] for a in record["actors"]] == ["Al Pacino", "Robert De Niro"]
        assert [d["name"] for d in record["directors"]] == ["Michael Mann"]
        get_page.assert_awaited_once()
        kwargs = get_page.await_args.kwargs
        assert kwargs["page_size"] == 1
        assert kwargs["page_no"] == 2
        assert list(kwargs["order"]) == [OrderClause("releaseDate", OrderDirection.DESC)]

    async def test_defaults_to_first_page_of_100(self, client):
        meta = PaginationMetadata(
            page_size=100, page_no=1, total_count=0, total_pages=0, has_next=False, has_prev=False
        )
        get_page = AsyncMock(return_value=([], meta))

        with patch.object(MovieRepository, "get_page", get_page):
            response = await client.get("/api/movies/catalog")

        assert response.status_code == 200
        assert response.json()["records"] == []
        get_page.assert_awaited_once_with(page_size=100, page_no=1, order=None)

    @pytest.mark.parametrize("params", [{"pageSize": 0}, {"pageSize": 101}, {"pageNo": 0}])
    async def test_out_of_range_paging(self, client, params):
        response = await client.get("/api/movies/catalog", params=params)

        assert response.status_code == 422


@pytest.mark.integration
class TestMovieWrites:
    """Tests for movie creation and credits."""

    async def test_create_movie(self, client):
        movie = make_movie("Heat")
        save_entity = AsyncMock(return_value=movie)

        with patch.object(MovieRepository, "save_entity", save_entity):
            response = await client.post(
                "/api/movies",
                json={
                    "title": "  Heat ",
                    "poster": "https://img.test/heat.jpg",
                    "releaseDate": "1995-12-15T00:00:00Z",
                },
            )

        assert response.status_code == 201
        assert response.json() == {"id": str(movie.id)}
        kwargs = save_entity.await_args.kwargs
        assert kwargs["title"] == "Heat"
        assert kwargs["poster"] == "https://img.test/heat.jpg"
        assert kwargs["release_date"].year == 1995

    async def test_create_movie_requires_title(self, client):
        response = await client.post("/api/movies", json={"title": "   "})

        assert response.status_code == 422

    async def test_credit_actor(self, client):
        movie = make_movie("Heat")
        actor_id = uuid4()
        link = MovieActor(id=uuid4(), movie_id=movie.id, actor_id=actor_id)

        with (
            patch.object(MovieRepository, "get_by_id", AsyncMock(return_value=movie)),
            patch.object(MovieRepository, "add_actor", AsyncMock(return_value=link)) as add_actor,
        ):
            response = await client.post(
                f"/api/movies/{movie.id}/actors", json={"actorId": str(actor_id)}
            )

        assert response.status_code == 201
        assert response.json() == {"id": str(link.id)}
        add_actor.assert_awaited_once_with(movie.id, actor_id)

    async def test_credit_on_missing_movie(self, client):
        with patch.object(MovieRepository, "get_by_id", AsyncMock(return_value=None)):
            response = await client.post(
                f"/api/movies/{uuid4()}/directors", json={"directorId": str(uuid4())}
            )

        assert response.status_code == 404
        assert response.json()["detail"] == "Movie not found"

    async def test_get_movie_detail(self, client):
        movie = make_movie("Heat", description="L.A. crime saga")

        with patch.object(MovieRepository, "get_detail", AsyncMock(return_value=movie)):
            response = await client.get(f"/api/movies/{movie.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Heat"
        assert data["music"] == []
        assert data["trailerUrl"] is None
