"""
Tests unitaires pour CollectionStore.

Verifie l'ordre de la collection, le cycle chargement/persistance, la
politique de recuperation des donnees illisibles et la migration.
"""

import json
from datetime import datetime

import pytest

from nextflix.core.entities.collection import MediaKind, UserRating
from nextflix.infrastructure.persistence.key_value_store import InMemoryKeyValueStore
from nextflix.services.collection_store import CollectionStore
from nextflix.utils.constants import (
    STORAGE_KEY_COLLECTION,
    STORAGE_KEY_LAST_ADDED,
)


def _stored_entry(local_id: str, title: str, **overrides) -> dict:
    data = {
        "id": local_id,
        "tmdb_id": None,
        "title": title,
        "type": "movie",
        "poster": None,
        "backdrop": None,
        "overview": "",
        "releaseDate": "2010-07-15",
        "rating": None,
        "dateWatched": "2024-01-01",
        "tmdbRating": 7.0,
        "cast": [],
        "director": "",
        "genres": [],
    }
    data.update(overrides)
    return data


def _persisted(kv_store) -> list[dict]:
    return json.loads(kv_store.get(STORAGE_KEY_COLLECTION))


class TestAdd:
    def test_add_prepends(self, store, make_result):
        store.add(make_result(1, "A"))
        store.add(make_result(2, "B"))

        assert [e.title for e in store.entries] == ["B", "A"]

    def test_add_copies_result_fields(self, store, make_result):
        entry = store.add(
            make_result(27205, "Inception", cast=("Leonardo DiCaprio",), director="Christopher Nolan"),
            UserRating.LOVE,
        )

        assert entry.local_id == "local-1"
        assert entry.provider_id == 27205
        assert entry.user_rating is UserRating.LOVE
        assert entry.date_added == "2024-05-01"
        assert entry.cast == ("Leonardo DiCaprio",)
        assert entry.director == "Christopher Nolan"
        assert entry.provider_rating == 8.4

    def test_add_resolves_genres_when_missing(self, store, make_result):
        entry = store.add(make_result(genre_ids=(28, 878), genres=None))

        assert entry.genres == ("Action", "Science Fiction")

    def test_add_keeps_resolved_genres(self, store, make_result):
        entry = store.add(make_result(genres=("Drama",)))

        assert entry.genres == ("Drama",)

    def test_add_trims_title(self, store, make_result):
        assert store.add(make_result(title="  Heat  ")).title == "Heat"

    def test_add_rejects_people(self, store, make_result):
        with pytest.raises(ValueError):
            store.add(make_result(media_kind=None))

    def test_add_rejects_empty_title(self, store, make_result):
        with pytest.raises(ValueError):
            store.add(make_result(title="   "))

    def test_add_persists(self, store, kv_store, make_result):
        store.add(make_result(1, "A"), UserRating.UP)

        assert _persisted(kv_store)[0]["title"] == "A"
        assert _persisted(kv_store)[0]["rating"] == "up"

    def test_add_records_last_added(self, store, kv_store, make_result):
        store.add(make_result())

        assert kv_store.get(STORAGE_KEY_LAST_ADDED) == "2024-05-01T20:30:00"
        assert store.last_added == "2024-05-01T20:30:00"

    def test_local_ids_are_unique_by_default(self, kv_store, make_result):
        collection = CollectionStore(kv_store)
        collection.load()

        first = collection.add(make_result(1, "A"))
        second = collection.add(make_result(2, "B"))

        assert first.local_id != second.local_id


class TestUpdateRatingAndDelete:
    def test_update_rating(self, store, make_result):
        entry = store.add(make_result())

        store.update_rating(entry.local_id, UserRating.DOWN)

        assert store.get(entry.local_id).user_rating is UserRating.DOWN

    def test_update_rating_is_idempotent(self, store, kv_store, make_result):
        entry = store.add(make_result())

        store.update_rating(entry.local_id, UserRating.LOVE)
        first = kv_store.get(STORAGE_KEY_COLLECTION)
        store.update_rating(entry.local_id, UserRating.LOVE)

        assert kv_store.get(STORAGE_KEY_COLLECTION) == first

    def test_clear_rating(self, store, make_result):
        entry = store.add(make_result(), UserRating.UP)

        store.update_rating(entry.local_id, None)

        assert store.get(entry.local_id).user_rating is None

    def test_update_unknown_id_is_noop(self, store, make_result):
        store.add(make_result())
        before = store.entries

        store.update_rating("missing", UserRating.LOVE)

        assert store.entries == before

    def test_update_keeps_position(self, store, make_result):
        first = store.add(make_result(1, "A"))
        store.add(make_result(2, "B"))

        store.update_rating(first.local_id, UserRating.LOVE)

        assert [e.title for e in store.entries] == ["B", "A"]

    def test_delete(self, store, kv_store, make_result):
        entry = store.add(make_result(1, "A"))
        store.add(make_result(2, "B"))

        store.delete(entry.local_id)

        assert [e.title for e in store.entries] == ["B"]
        assert [e["title"] for e in _persisted(kv_store)] == ["B"]

    def test_delete_unknown_id_is_noop(self, store, make_result):
        store.add(make_result())

        store.delete("missing")

        assert len(store.entries) == 1

    def test_link_provider_id_on_legacy_entry(self):
        kv_store = InMemoryKeyValueStore({
            STORAGE_KEY_COLLECTION: json.dumps([_stored_entry("a", "Heat")]),
        })
        collection = CollectionStore(kv_store)
        collection.load()

        collection.link_provider_id("a", 949)

        assert collection.get("a").provider_id == 949
        assert _persisted(kv_store)[0]["tmdb_id"] == 949

    def test_link_never_replaces_an_existing_provider_id(self, store, make_result):
        entry = store.add(make_result(27205, "Inception"))

        store.link_provider_id(entry.local_id, 1)

        assert entry.provider_id == 27205


class TestLoad:
    def test_empty_storage(self, kv_store):
        collection = CollectionStore(kv_store)

        collection.load()

        assert collection.entries == ()
        assert collection.is_loaded
        assert not collection.recovered_from_corrupt

    def test_loads_persisted_order(self):
        kv_store = InMemoryKeyValueStore({
            STORAGE_KEY_COLLECTION: json.dumps([_stored_entry("b", "B"), _stored_entry("a", "A")]),
        })
        collection = CollectionStore(kv_store)

        collection.load()

        assert [e.local_id for e in collection.entries] == ["b", "a"]

    def test_no_write_before_load(self, kv_store, make_result):
        collection = CollectionStore(kv_store)

        collection.add(make_result())

        assert kv_store.writes == []

    def test_load_does_not_overwrite_storage(self):
        payload = json.dumps([_stored_entry("a", "A")])
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: payload})

        CollectionStore(kv_store).load()

        assert kv_store.get(STORAGE_KEY_COLLECTION) == payload
        assert kv_store.writes == []

    def test_round_trip_through_storage(self, store, kv_store, make_result):
        store.add(make_result(1, "A"), UserRating.LOVE)
        store.add(make_result(2, "B", media_kind=MediaKind.SERIES))

        reloaded = CollectionStore(kv_store)
        reloaded.load()

        assert reloaded.entries == store.entries


class TestCorruptRecovery:
    @pytest.mark.parametrize("raw", ["{not json", '{"id": "a"}', '"text"', "42"])
    def test_unreadable_payload_resets_and_keeps_backup(self, raw):
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: raw})
        collection = CollectionStore(kv_store)

        collection.load()

        assert collection.entries == ()
        assert collection.recovered_from_corrupt
        assert kv_store.get(STORAGE_KEY_COLLECTION + ".corrupt") == raw

    def test_original_payload_is_kept_until_next_write(self):
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: "{not json"})

        CollectionStore(kv_store).load()

        assert kv_store.get(STORAGE_KEY_COLLECTION) == "{not json"

    def test_bad_entries_are_skipped(self):
        kv_store = InMemoryKeyValueStore({
            STORAGE_KEY_COLLECTION: json.dumps([
                _stored_entry("a", "A"),
                "not an object",
                {"title": "No id"},
                _stored_entry("c", "   "),
                _stored_entry("d", "D", type="person"),
                _stored_entry("e", "E"),
            ]),
        })
        collection = CollectionStore(kv_store)

        collection.load()

        assert [e.local_id for e in collection.entries] == ["a", "e"]

    def test_skipped_entries_keep_a_backup(self):
        raw = json.dumps([_stored_entry("a", "A"), {"title": "No id"}])
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: raw})
        collection = CollectionStore(kv_store)

        collection.load()
        collection.update_rating("a", UserRating.UP)

        assert collection.recovered_from_corrupt
        assert kv_store.get(STORAGE_KEY_COLLECTION + ".corrupt") == raw

    def test_malformed_optional_field_keeps_the_entry(self):
        kv_store = InMemoryKeyValueStore({
            STORAGE_KEY_COLLECTION: json.dumps([
                _stored_entry("a", "The Matrix"),
                _stored_entry("b", "Pulp Fiction", tmdbRating="N/A"),
            ]),
        })
        collection = CollectionStore(kv_store)

        collection.load()
        collection.update_rating("a", UserRating.LOVE)

        assert [e["title"] for e in _persisted(kv_store)] == ["The Matrix", "Pulp Fiction"]
        assert _persisted(kv_store)[1]["tmdbRating"] is None
        assert not collection.recovered_from_corrupt
        assert kv_store.get(STORAGE_KEY_COLLECTION + ".corrupt") is None

    def test_random_mock_ids_stay_distinct(self):
        kv_store = InMemoryKeyValueStore({
            STORAGE_KEY_COLLECTION: json.dumps([
                _stored_entry("a", "Foo Movie", tmdb_id=0.123),
                _stored_entry("b", "Bar Movie", tmdb_id=0.987),
            ]),
        })
        collection = CollectionStore(kv_store)

        collection.load()

        assert [e.provider_id for e in collection.entries] == [None, None]

    def test_duplicate_local_ids_keep_the_first(self):
        raw = json.dumps([
            _stored_entry("a", "First"),
            _stored_entry("a", "Second"),
        ])
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: raw})
        collection = CollectionStore(kv_store)

        collection.load()

        assert [e.title for e in collection.entries] == ["First"]
        assert kv_store.get(STORAGE_KEY_COLLECTION + ".corrupt") == raw


class TestBackfill:
    def _legacy_store(self, *entries) -> tuple[CollectionStore, InMemoryKeyValueStore]:
        kv_store = InMemoryKeyValueStore({STORAGE_KEY_COLLECTION: json.dumps(list(entries))})
        collection = CollectionStore(kv_store)
        collection.load()
        return collection, kv_store

    @staticmethod
    def _legacy(local_id, title, overview=""):
        data = _stored_entry(local_id, title, overview=overview)
        for key in ("cast", "director", "genres"):
            del data[key]
        return data

    def test_fills_known_title(self):
        collection, _ = self._legacy_store(self._legacy("a", "Inception", "A dream heist."))

        assert collection.backfill_missing_fields() == 1

        entry = collection.get("a")
        assert entry.director == "Christopher Nolan"
        assert entry.cast[0] == "Leonardo DiCaprio"
        assert entry.genres == ("Crime", "Science Fiction")

    def test_unknown_title_gets_empty_values(self):
        collection, _ = self._legacy_store(self._legacy("a", "Obscure Film"))

        collection.backfill_missing_fields()

        entry = collection.get("a")
        assert entry.cast == ()
        assert entry.genres == ()
        assert entry.director is None

    def test_present_fields_are_not_touched(self):
        data = _stored_entry("a", "Inception", genres=["Drama"], cast=["Someone"])
        del data["director"]
        collection, _ = self._legacy_store(data)

        collection.backfill_missing_fields()

        entry = collection.get("a")
        assert entry.genres == ("Drama",)
        assert entry.cast == ("Someone",)
        assert entry.director == "Christopher Nolan"

    def test_backfill_twice_is_identical(self):
        collection, kv_store = self._legacy_store(
            self._legacy("a", "Inception", "A dream heist."),
            self._legacy("b", "Obscure Film"),
        )

        collection.backfill_missing_fields()
        first = collection.entries
        first_payload = kv_store.get(STORAGE_KEY_COLLECTION)
        writes = len(kv_store.writes)

        assert collection.backfill_missing_fields() == 0
        assert collection.entries == first
        assert kv_store.get(STORAGE_KEY_COLLECTION) == first_payload
        assert len(kv_store.writes) == writes

    def test_complete_collection_is_not_rewritten(self, store, kv_store, make_result):
        store.add(make_result(director="Christopher Nolan"))
        writes = len(kv_store.writes)

        assert store.backfill_missing_fields() == 0
        assert len(kv_store.writes) == writes


class TestInjectedDependencies:
    def test_clock_drives_date_added(self, kv_store, make_result):
        collection = CollectionStore(kv_store, clock=lambda: datetime(2023, 12, 31, 23, 59))
        collection.load()

        assert collection.add(make_result()).date_added == "2023-12-31"
