"""
Tests d'integration du moteur : services reels, stockage en memoire,
catalogue hors-ligne.
"""

import json

import pytest

from nextflix.adapters.api.offline_provider import OfflineSearchProvider
from nextflix.core.entities.collection import UserRating
from nextflix.core.value_objects.view_options import RatingFilter, ViewOptions
from nextflix.infrastructure.persistence.key_value_store import InMemoryKeyValueStore
from nextflix.services.collection_store import CollectionStore
from nextflix.services.engine import NextFlixEngine
from nextflix.services.exporter import CollectionExporter
from nextflix.services.identity_resolver import IdentityResolver
from nextflix.services.metadata_enricher import MetadataEnricher
from nextflix.services.preferences import PreferencesService
from nextflix.services.search_aggregator import SearchAggregator
from nextflix.services.view_composer import ViewComposer
from nextflix.utils.constants import STORAGE_KEY_COLLECTION


def _build_engine(kv_store, fixed_clock, id_factory) -> NextFlixEngine:
    provider = OfflineSearchProvider()
    preferences = PreferencesService(kv_store)
    store = CollectionStore(kv_store, clock=fixed_clock, id_factory=id_factory)
    return NextFlixEngine(
        store=store,
        aggregator=SearchAggregator(
            provider,
            MetadataEnricher(provider),
            content_filter_enabled=lambda: preferences.content_filter_enabled,
        ),
        identity_resolver=IdentityResolver(lambda: store.entries),
        view_composer=ViewComposer(),
        exporter=CollectionExporter(lambda: store.entries, clock=fixed_clock),
        preferences=preferences,
    )


@pytest.fixture
def engine(kv_store, fixed_clock, id_factory) -> NextFlixEngine:
    nextflix = _build_engine(kv_store, fixed_clock, id_factory)
    nextflix.start()
    return nextflix


class TestStart:
    def test_start_loads_then_backfills(self, fixed_clock, id_factory):
        legacy = {
            "id": "old", "title": "Interstellar", "type": "movie",
            "overview": "A journey through space.", "dateWatched": "2023-01-01",
        }
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: json.dumps([legacy])})
        engine = _build_engine(kv_store, fixed_clock, id_factory)

        assert engine.start() == 1

        entry = engine.store.get("old")
        assert entry.director == "Christopher Nolan"
        assert entry.genres == ("Adventure", "Science Fiction")

    def test_start_twice_is_noop(self, engine):
        assert engine.start() == 0


class TestRateResult:
    @pytest.mark.asyncio
    async def test_rating_a_new_result_adds_it(self, engine):
        result = (await engine.search("inception"))[0]

        entry = engine.rate_result(result, UserRating.LOVE)

        assert engine.store.entries == (entry,)
        assert entry.director == "Christopher Nolan"
        assert len(entry.cast) == 10

    @pytest.mark.asyncio
    async def test_rating_an_owned_result_updates_it(self, engine):
        result = (await engine.search("inception"))[0]
        first = engine.rate_result(result, UserRating.UP)

        second = engine.rate_result(result, UserRating.DOWN)

        assert second.local_id == first.local_id
        assert len(engine.store.entries) == 1
        assert engine.store.entries[0].user_rating is UserRating.DOWN

    def test_rating_links_a_legacy_entry_instead_of_duplicating(
        self, fixed_clock, id_factory, make_result
    ):
        legacy = {
            "id": "old", "title": "inception", "type": "movie", "rating": "up",
            "overview": "", "dateWatched": "2023-01-01",
        }
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: json.dumps([legacy])})
        engine = _build_engine(kv_store, fixed_clock, id_factory)
        engine.start()

        entry = engine.rate_result(make_result(27205, "Inception"), UserRating.LOVE)

        assert entry.local_id == "old"
        assert len(engine.store.entries) == 1
        assert entry.provider_id == 27205
        assert entry.user_rating is UserRating.LOVE
        assert json.loads(kv_store.get(STORAGE_KEY_COLLECTION))[0]["tmdb_id"] == 27205
        assert engine.find_existing(make_result(27205, "Inception")) is entry

    def test_linking_without_rating_keeps_the_legacy_rating(
        self, fixed_clock, id_factory, make_result
    ):
        legacy = {
            "id": "old", "title": "Inception", "type": "movie", "rating": "down",
            "dateWatched": "2023-01-01",
        }
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: json.dumps([legacy])})
        engine = _build_engine(kv_store, fixed_clock, id_factory)
        engine.start()

        entry = engine.rate_result(make_result(27205, "Inception"), None)

        assert entry.user_rating is UserRating.DOWN
        assert entry.provider_id == 27205

    def test_legacy_entry_of_other_kind_is_not_linked(
        self, fixed_clock, id_factory, make_result
    ):
        legacy = {"id": "old", "title": "Inception", "type": "series", "dateWatched": "2023-01-01"}
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: json.dumps([legacy])})
        engine = _build_engine(kv_store, fixed_clock, id_factory)
        engine.start()

        engine.rate_result(make_result(27205, "Inception"), UserRating.UP)

        assert len(engine.store.entries) == 2
        assert engine.store.get("old").provider_id is None

    @pytest.mark.asyncio
    async def test_find_existing(self, engine):
        result = (await engine.search("parasite"))[0]
        assert engine.find_existing(result) is None

        engine.add(result)

        assert engine.find_existing(result) is not None


class TestProjectionAndExport:
    @pytest.mark.asyncio
    async def test_project_and_stats(self, engine):
        inception = (await engine.search("inception"))[0]
        office = (await engine.search("office"))[0]
        engine.rate_result(inception, UserRating.LOVE)
        engine.rate_result(office, None)

        loved = engine.project(ViewOptions(rating_filter=RatingFilter.LOVE))
        stats = engine.stats()

        assert [e.title for e in loved] == ["Inception"]
        assert [e.title for e in engine.project()] == ["The Office", "Inception"]
        assert (stats.total, stats.movies, stats.series, stats.love) == (2, 1, 1, 1)

    @pytest.mark.asyncio
    async def test_delete_and_update(self, engine):
        entry = engine.add((await engine.search("dune two"))[0])

        engine.update_rating(entry.local_id, UserRating.UP)
        assert engine.store.get(entry.local_id).user_rating is UserRating.UP

        engine.delete(entry.local_id)
        assert engine.store.entries == ()

    @pytest.mark.asyncio
    async def test_exports(self, engine):
        engine.add((await engine.search("matrix"))[0], UserRating.LOVE)

        assert json.loads(engine.export_json())["totalItems"] == 1
        assert "The Matrix" in engine.export_csv()
        assert "1. The Matrix (1999) [Movie] | Love This!" in engine.export_txt()
