from unittest.mock import AsyncMock

import httpx
import pytest

from filmstore.api.client import APIClient
from filmstore.api.exceptions import DecodingError, NetworkError, ServerError
from filmstore.movies.service import filter_movies
from filmstore.movies.session import CatalogSession
from filmstore.utils.state import LoadState


class TestFilterMovies:
    """Test suite for filter_movies"""

    def test_empty_query_returns_everything_in_order(self, sample_movies):
        result = filter_movies(sample_movies, "")

        assert result == sample_movies
        assert result is not sample_movies

    def test_matches_category_ignoring_case(self, sample_movies):
        result = filter_movies(sample_movies, "acTioN")

        assert [m.name for m in result] == ["Inception"]

    def test_matches_name_substring(self, sample_movies):
        result = filter_movies(sample_movies, "in")

        assert [m.name for m in result] == ["Interstellar", "Inception"]

    def test_matches_name_or_category(self, sample_movies):
        result = filter_movies(sample_movies, "dra")

        assert [m.name for m in result] == ["Django"]

    def test_no_match(self, sample_movies):
        assert filter_movies(sample_movies, "western") == []


class TestCatalogSession:
    """Test suite for CatalogSession"""

    async def test_load_success(self, api_client):
        session = CatalogSession(api_client)
        assert session.state.status is LoadState.IDLE

        await session.load()

        assert session.state.status is LoadState.LOADED
        assert len(session.movies) == 4
        assert session.state.error is None

    async def test_load_failure_keeps_description(self, api_client, backend):
        backend.movies_status = 500
        session = CatalogSession(api_client)

        await session.load()

        assert session.state.status is LoadState.FAILED
        assert "500" in session.state.error
        assert session.movies == []

    async def test_failed_reload_drops_previous_movies(self, api_client, backend):
        session = CatalogSession(api_client)
        await session.load()
        assert len(session.movies) == 4

        backend.movies_status = 500
        await session.load()

        assert session.state.is_failed
        assert session.movies == []
        assert session.filter("") == []

    @pytest.mark.parametrize(
        "error",
        [
            DecodingError(),
            ServerError("boom"),
            NetworkError(httpx.ConnectTimeout("timed out")),
        ]
    )
    async def test_every_failure_kind_is_an_error(self, error):
        client = AsyncMock(spec=APIClient)
        client.list_movies.side_effect = error
        session = CatalogSession(client)

        await session.load()

        assert session.state.is_failed
        assert session.state.error == error.description

    async def test_retry_recovers(self, api_client, backend):
        backend.movies_status = 503
        session = CatalogSession(api_client)
        await session.load()
        assert session.state.is_failed

        backend.movies_status = 200
        await session.load()

        assert session.state.is_loaded
        assert session.state.error is None

    async def test_filter_uses_loaded_movies(self, api_client):
        session = CatalogSession(api_client)
        assert session.filter("nolan") == []

        await session.load()

        assert [m.name for m in session.filter("science")] == ["Interstellar"]
        assert session.filter("") == session.movies
