"""
Tests d'integration du stockage cle-valeur SQLModel (SQLite sur disque).
"""

import pytest

from nextflix.infrastructure.persistence.database import create_db_engine, init_db
from nextflix.infrastructure.persistence.key_value_store import (
    InMemoryKeyValueStore,
    SQLModelKeyValueStore,
)


@pytest.fixture
def engine(tmp_path):
    """Engine SQLite dans un sous-repertoire cree a la volee."""
    return init_db(create_db_engine(f"sqlite:///{tmp_path / 'data' / 'nextflix.db'}"))


class TestSQLModelKeyValueStore:
    def test_missing_key(self, engine):
        assert SQLModelKeyValueStore(engine).get("nextflix-data") is None

    def test_set_then_get(self, engine):
        store = SQLModelKeyValueStore(engine)

        store.set("nextflix-data", "[]")

        assert store.get("nextflix-data") == "[]"

    def test_overwrite(self, engine):
        store = SQLModelKeyValueStore(engine)
        store.set("nextflix-content-filter", "true")

        store.set("nextflix-content-filter", "false")

        assert store.get("nextflix-content-filter") == "false"

    def test_persists_across_instances(self, engine):
        SQLModelKeyValueStore(engine).set("nextflix-data", '[{"id": "a"}]')

        assert SQLModelKeyValueStore(engine).get("nextflix-data") == '[{"id": "a"}]'

    def test_unicode_values(self, engine):
        store = SQLModelKeyValueStore(engine)

        store.set("nextflix-data", "Amélie, 千と千尋の神隠し")

        assert store.get("nextflix-data") == "Amélie, 千と千尋の神隠し"

    def test_init_db_is_idempotent(self, engine):
        SQLModelKeyValueStore(engine).set("key", "value")

        init_db(engine)

        assert SQLModelKeyValueStore(engine).get("key") == "value"


class TestInMemoryKeyValueStore:
    def test_initial_values(self):
        store = InMemoryKeyValueStore({"key": "value"})
        assert store.get("key") == "value"

    def test_writes_are_recorded(self):
        store = InMemoryKeyValueStore()

        store.set("a", "1")
        store.set("b", "2")

        assert store.writes == ["a", "b"]
