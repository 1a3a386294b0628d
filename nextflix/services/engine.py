"""
Facade du moteur pour la couche de presentation.

Regroupe les points d'entree appeles par l'interface : cycle de demarrage
(chargement puis migration), recherche, ajout/notation, suppression,
projection et exports. La presentation n'accede jamais directement au
stockage.
"""

from typing import Optional

from loguru import logger

from nextflix.core.entities.collection import CollectionEntry, UserRating
from nextflix.core.ports.api_clients import SearchResult
from nextflix.core.value_objects.view_options import CollectionStats, ViewOptions
from nextflix.services.collection_store import CollectionStore
from nextflix.services.exporter import CollectionExporter
from nextflix.services.identity_resolver import IdentityCandidate, IdentityResolver
from nextflix.services.preferences import PreferencesService
from nextflix.services.search_aggregator import SearchAggregator
from nextflix.services.view_composer import ViewComposer


class NextFlixEngine:
    """
    Points d'entree du moteur de collection.

    Example:
        engine = container.engine()
        engine.start()
        results = await engine.search("inception")
        entry = engine.rate_result(results[0], UserRating.LOVE)
        visible = engine.project(ViewOptions())
    """

    def __init__(
        self,
        store: CollectionStore,
        aggregator: SearchAggregator,
        identity_resolver: IdentityResolver,
        view_composer: ViewComposer,
        exporter: CollectionExporter,
        preferences: PreferencesService,
    ) -> None:
        self._store = store
        self._aggregator = aggregator
        self._identity = identity_resolver
        self._view = view_composer
        self._exporter = exporter
        self._preferences = preferences

    @property
    def store(self) -> CollectionStore:
        return self._store

    @property
    def exporter(self) -> CollectionExporter:
        return self._exporter

    def start(self) -> int:
        """
        Cycle de demarrage : chargement puis migration des champs manquants.

        Sans effet si la collection est deja chargee.

        Returns:
            Nombre d'entrees completees par la migration
        """
        if self._store.is_loaded:
            return 0
        self._store.load()
        return self._store.backfill_missing_fields()

    async def search(self, query: str) -> list[SearchResult]:
        return await self._aggregator.search(query)

    def find_existing(self, result: SearchResult) -> Optional[CollectionEntry]:
        """Entree deja collectionnee pour ce resultat (par ID fournisseur)."""
        return self._identity.find_existing(IdentityCandidate.from_search_result(result))

    def rate_result(
        self, result: SearchResult, rating: Optional[UserRating]
    ) -> CollectionEntry:
        """
        Note un resultat de recherche : met a jour l'entree existante ou
        en cree une nouvelle.

        Une ancienne entree sans ID fournisseur, de meme titre et de meme
        type, recoit l'ID du resultat au lieu d'etre dupliquee ; sa note
        n'est remplacee que si une note est donnee.
        """
        existing = self.find_existing(result)
        if existing is None and result.media_kind is not None:
            legacy = self._identity.find_legacy_match(result.title, result.media_kind)
            if legacy is not None:
                self._store.link_provider_id(legacy.local_id, result.provider_id)
                if rating is not None:
                    self._store.update_rating(legacy.local_id, rating)
                return legacy
        if existing is None:
            return self._store.add(result, rating)

        logger.debug(f"{result.title} deja en collection, mise a jour de la note")
        self._store.update_rating(existing.local_id, rating)
        return existing

    def add(self, result: SearchResult, rating: Optional[UserRating] = None) -> CollectionEntry:
        return self._store.add(result, rating)

    def update_rating(self, local_id: str, rating: Optional[UserRating]) -> None:
        self._store.update_rating(local_id, rating)

    def delete(self, local_id: str) -> None:
        self._store.delete(local_id)

    def project(self, options: Optional[ViewOptions] = None) -> list[CollectionEntry]:
        """Projection de la collection ; le filtre de contenu suit la preference."""
        if options is None:
            options = ViewOptions(content_filter=self._preferences.content_filter_enabled)
        return self._view.project(self._store.entries, options)

    def stats(self) -> CollectionStats:
        return self._view.stats(self._store.entries)

    def export_csv(self) -> str:
        return self._exporter.export_csv()

    def export_json(self) -> str:
        return self._exporter.export_json()

    def export_txt(self) -> str:
        return self._exporter.export_txt()
