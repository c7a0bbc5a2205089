"""Tests for MovieRepository."""

from uuid import uuid4

import pytest

from cinedex.models.orm import MovieActor, MovieTrailer
from cinedex.repositories.movie import MovieRepository


@pytest.mark.unit
class TestMovieRepository:
    """Tests for MovieRepository."""

    async def test_catalog_page_joins_cast_outside_the_window(
        self, mock_session, query_result, compile_sql
    ):
        mock_session.execute.side_effect = [query_result(scalar=12), query_result(rows=[])]

        _, meta = await MovieRepository(mock_session).get_page(page_size=5, page_no=3)

        assert meta.total_pages == 3
        assert meta.has_next is False
        page_sql = compile_sql(mock_session.execute.await_args_list[1].args[0])
        assert "LEFT OUTER JOIN movie_actors" in page_sql
        assert "LEFT OUTER JOIN movie_directors" in page_sql
        assert "LEFT OUTER JOIN directors" in page_sql
        subquery = page_sql[page_sql.index("IN (SELECT"):]
        assert "JOIN" not in subquery
        assert "LIMIT 5 OFFSET 10" in subquery

    async def test_catalog_count_ignores_joins(self, mock_session, query_result, compile_sql):
        mock_session.execute.side_effect = [query_result(scalar=0), query_result(rows=[])]

        _, meta = await MovieRepository(mock_session).get_page(page_size=5, page_no=1)

        count_sql = compile_sql(mock_session.execute.await_args_list[0].args[0])
        assert "JOIN" not in count_sql
        assert meta.total_pages == 0

    async def test_add_actor_creates_link(self, mock_session):
        movie_id, actor_id = uuid4(), uuid4()

        link = await MovieRepository(mock_session).add_actor(movie_id, actor_id)

        assert isinstance(link, MovieActor)
        assert link.movie_id == movie_id
        assert link.actor_id == actor_id
        mock_session.add.assert_called_once_with(link)
        mock_session.flush.assert_awaited_once()

    async def test_set_trailer_creates_when_missing(self, mock_session, query_result):
        mock_session.execute.return_value = query_result(scalar=None)
        movie_id = uuid4()

        trailer = await MovieRepository(mock_session).set_trailer(movie_id, "https://v.test/1")

        assert trailer.url == "https://v.test/1"
        mock_session.add.assert_called_once_with(trailer)

    async def test_set_trailer_replaces_existing(self, mock_session, query_result):
        existing = MovieTrailer(id=uuid4(), movie_id=uuid4(), url="https://v.test/old")
        mock_session.execute.return_value = query_result(scalar=existing)

        trailer = await MovieRepository(mock_session).set_trailer(
            existing.movie_id, "https://v.test/new"
        )

        assert trailer is existing
        assert existing.url == "https://v.test/new"
        mock_session.add.assert_not_called()
