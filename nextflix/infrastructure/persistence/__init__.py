"""
Persistance cle-valeur.

- database : creation de l'engine SQLite et des tables
- models : table key_values
- key_value_store : implementations SQLModel et en memoire de IKeyValueStore
"""

from nextflix.infrastructure.persistence.key_value_store import (
    InMemoryKeyValueStore,
    SQLModelKeyValueStore,
)

__all__ = [
    "InMemoryKeyValueStore",
    "SQLModelKeyValueStore",
]
