"""
Fixtures pytest partagees pour les tests NextFlix.

Ce module contient les fixtures communes utilisees dans les tests:
- Stockage cle-valeur en memoire
- Horloge figee et generateur d'IDs locaux deterministe
- Fabriques de SearchResult et de CollectionEntry
- CollectionStore charge sur le stockage en memoire
"""

from datetime import datetime
from itertools import count
from typing import Callable, Optional

import pytest

from nextflix.core.entities.collection import CollectionEntry, MediaKind, UserRating
from nextflix.core.ports.api_clients import SearchResult
from nextflix.infrastructure.persistence.key_value_store import InMemoryKeyValueStore
from nextflix.services.collection_store import CollectionStore

FIXED_NOW = datetime(2024, 5, 1, 20, 30, 0)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    """Stockage cle-valeur vide, qui trace les cles ecrites."""
    return InMemoryKeyValueStore()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Horloge figee au 1er mai 2024, 20h30."""
    return lambda: FIXED_NOW


@pytest.fixture
def id_factory() -> Callable[[], str]:
    """Generateur d'IDs locaux sequentiels (local-1, local-2, ...)."""
    counter = count(1)
    return lambda: f"local-{next(counter)}"


@pytest.fixture
def make_result() -> Callable[..., SearchResult]:
    """
    Fabrique de SearchResult avec des valeurs par defaut affichables.

    Usage:
        result = make_result(provider_id=42, title="Heat")
    """

    def _make(
        provider_id: int = 27205,
        title: str = "Inception",
        media_kind: Optional[MediaKind] = MediaKind.MOVIE,
        **overrides,
    ) -> SearchResult:
        media_type = {MediaKind.MOVIE: "movie", MediaKind.SERIES: "tv"}.get(media_kind, "person")
        values = dict(
            provider_id=provider_id,
            title=title,
            media_type=media_type,
            media_kind=media_kind,
            poster_ref="/poster.jpg",
            backdrop_ref="/backdrop.jpg",
            overview="A thief who steals corporate secrets through dream-sharing.",
            release_date="2010-07-15",
            provider_rating=8.4,
            genre_ids=(28, 878),
        )
        values.update(overrides)
        return SearchResult(**values)

    return _make


@pytest.fixture
def make_entry() -> Callable[..., CollectionEntry]:
    """
    Fabrique de CollectionEntry complete (aucun champ manquant).

    Usage:
        entry = make_entry(local_id="a", title="Heat", release_date="1995-12-15")
    """

    def _make(
        local_id: str = "entry-1",
        title: str = "Inception",
        media_kind: MediaKind = MediaKind.MOVIE,
        user_rating: Optional[UserRating] = None,
        **overrides,
    ) -> CollectionEntry:
        values = dict(
            local_id=local_id,
            provider_id=None,
            title=title,
            media_kind=media_kind,
            date_added="2024-05-01",
            overview="",
            release_date="2010-07-15",
            user_rating=user_rating,
            provider_rating=8.0,
            cast=(),
            director="",
            genres=(),
        )
        values.update(overrides)
        return CollectionEntry(**values)

    return _make


@pytest.fixture
def store(kv_store, fixed_clock, id_factory) -> CollectionStore:
    """CollectionStore charge (collection vide) avec horloge et IDs deterministes."""
    collection = CollectionStore(kv_store, clock=fixed_clock, id_factory=id_factory)
    collection.load()
    return collection
