"""
Tests for OfflineSearchProvider and provider selection.
"""

import pytest

from nextflix.adapters.api.factory import build_search_provider
from nextflix.adapters.api.offline_provider import OFFLINE_CATALOGUE, OfflineSearchProvider
from nextflix.adapters.api.tmdb_client import TMDBClient
from nextflix.config import Settings
from nextflix.core.entities.collection import MediaKind
from nextflix.core.ports.api_clients import ISearchProvider


@pytest.fixture
def provider() -> OfflineSearchProvider:
    return OfflineSearchProvider()


class TestOfflineSearch:
    """Tests for the offline catalogue search."""

    def test_implements_interface(self, provider):
        assert isinstance(provider, ISearchProvider)
        assert provider.source == "offline"

    @pytest.mark.asyncio
    async def test_matches_title_case_insensitively(self, provider):
        results = await provider.search_multi("INCEPTION")

        assert [r.title for r in results] == ["Inception"]
        assert results[0].media_kind is MediaKind.MOVIE

    @pytest.mark.asyncio
    async def test_every_token_must_match(self, provider):
        results = await provider.search_multi("dune two")

        assert [r.provider_id for r in results] == [693134]

    @pytest.mark.asyncio
    async def test_series_use_tmdb_tv_shape(self, provider):
        results = await provider.search_multi("breaking")

        assert results[0].media_type == "tv"
        assert results[0].media_kind is MediaKind.SERIES
        assert results[0].release_date == "2008-01-20"

    @pytest.mark.asyncio
    async def test_raw_rows_are_not_filtered(self, provider):
        """People and image-less rows are returned like TMDB would."""
        matrix = await provider.search_multi("matrix")
        nolan = await provider.search_multi("nolan")

        assert {r.provider_id for r in matrix} == {603, 999001}
        assert nolan[0].media_type == "person"

    @pytest.mark.asyncio
    async def test_blank_query(self, provider):
        assert await provider.search_multi("   ") == []

    @pytest.mark.asyncio
    async def test_pagination(self):
        paged = OfflineSearchProvider(page_size=2)

        first = await paged.search_multi("the", page=1)
        second = await paged.search_multi("the", page=2)

        assert len(first) == 2
        assert not {r.provider_id for r in first} & {r.provider_id for r in second}

    @pytest.mark.asyncio
    async def test_page_past_the_end(self, provider):
        assert await provider.search_multi("inception", page=2) == []


class TestOfflineCredits:
    @pytest.mark.asyncio
    async def test_known_title(self, provider):
        credits = await provider.get_credits(27205, MediaKind.MOVIE)

        assert credits["cast"][0]["name"] == "Leonardo DiCaprio"
        assert {"name": "Christopher Nolan", "job": "Director"} in credits["crew"]

    @pytest.mark.asyncio
    async def test_unknown_title(self, provider):
        assert await provider.get_credits(1, MediaKind.MOVIE) == {"cast": [], "crew": []}

    def test_catalogue_covers_both_kinds(self):
        kinds = {item["media_type"] for item in OFFLINE_CATALOGUE}
        assert {"movie", "tv"} <= kinds


class TestBuildSearchProvider:
    """Tests for provider selection from Settings."""

    def test_without_key_uses_offline(self, monkeypatch):
        monkeypatch.delenv("NEXTFLIX_TMDB_API_KEY", raising=False)
        settings = Settings(_env_file=None, tmdb_api_key=None)

        assert isinstance(build_search_provider(settings), OfflineSearchProvider)

    def test_placeholder_key_uses_offline(self):
        settings = Settings(_env_file=None, tmdb_api_key="your_api_key_here")

        assert isinstance(build_search_provider(settings), OfflineSearchProvider)

    def test_real_key_uses_tmdb(self):
        settings = Settings(_env_file=None, tmdb_api_key="0123456789abcdef0123456789abcdef")

        assert isinstance(build_search_provider(settings), TMDBClient)
