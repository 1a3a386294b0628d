"""
Service d'agregation de la recherche.

SearchAggregator transforme un terme saisi par l'utilisateur en une liste
ordonnee de SearchResult prets a afficher :

1. Pages 1..N de la recherche multi-type, recuperees en parallele
2. Fusion dans l'ordre du fournisseur (page 1 avant page 2)
3. Filtrage : films/series notes, avec image, contenu approprie
4. Enrichissement des credits pour les premiers candidats seulement
5. Resolution des genres pour tous les candidats

Le service est sans etat entre deux appels. L'anti-rebond de la saisie est
a la charge de l'appelant (voir services/debounce.py).
"""

import asyncio
from collections.abc import Callable
from dataclasses import replace
from typing import Optional

from loguru import logger

from nextflix.core.entities.collection import MediaKind
from nextflix.core.ports.api_clients import (
    ISearchProvider,
    ProviderUnavailableError,
    SearchResult,
)
from nextflix.core.ports.heuristics import IContentClassifier
from nextflix.services.content_classifier import KeywordContentClassifier
from nextflix.services.genre_resolver import GenreResolver
from nextflix.services.metadata_enricher import MetadataEnricher

SUPPORTED_KINDS = frozenset({MediaKind.MOVIE, MediaKind.SERIES})


class SearchAggregator:
    """
    Agregation multi-pages, filtrage et enrichissement des resultats.

    Attributes:
        DEFAULT_PAGES: Nombre de pages demandees par recherche
        DEFAULT_ENRICH_LIMIT: Nombre de candidats enrichis (un appel chacun)

    Example:
        aggregator = SearchAggregator(provider, enricher)
        results = await aggregator.search("nolan")
    """

    DEFAULT_PAGES: int = 2
    DEFAULT_ENRICH_LIMIT: int = 10

    def __init__(
        self,
        provider: ISearchProvider,
        enricher: MetadataEnricher,
        genre_resolver: Optional[GenreResolver] = None,
        classifier: Optional[IContentClassifier] = None,
        content_filter_enabled: Callable[[], bool] = lambda: True,
        pages: int = DEFAULT_PAGES,
        enrich_limit: int = DEFAULT_ENRICH_LIMIT,
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise l'agregateur.

        Args:
            provider: Fournisseur de recherche
            enricher: Service d'enrichissement des credits
            genre_resolver: Resolution des codes de genre
            classifier: Filtre de contenu
            content_filter_enabled: Lit l'etat courant du filtre de contenu
            pages: Nombre de pages recuperees (au moins 1)
            enrich_limit: Nombre de candidats enrichis
            timeout: Delai maximum par page en secondes
        """
        self._provider = provider
        self._enricher = enricher
        self._genre_resolver = genre_resolver or GenreResolver()
        self._classifier = classifier or KeywordContentClassifier()
        self._content_filter_enabled = content_filter_enabled
        self._pages = max(1, pages)
        self._enrich_limit = max(0, enrich_limit)
        self._timeout = timeout

    async def search(self, query: str) -> list[SearchResult]:
        """
        Recherche, filtre et enrichit les candidats d'une requete.

        Une requete vide ne declenche aucun appel. Un echec de la premiere
        page donne une liste vide ; un echec des pages suivantes ne retire
        que leurs lignes.

        Args:
            query: Terme saisi par l'utilisateur

        Returns:
            Candidats dans l'ordre de pertinence du fournisseur
        """
        query = query.strip()
        if not query:
            return []

        candidates = await self._fetch_pages(query)
        if not candidates:
            return []

        enabled = self._content_filter_enabled()
        kept = [c for c in candidates if self._is_displayable(c, enabled)]
        logger.debug(
            f"Recherche {query!r}: {len(candidates)} candidat(s), {len(kept)} retenu(s)"
        )

        enriched = await self._enrich_prefix(kept)
        return [self._with_genres(result) for result in enriched]

    async def _fetch_page(self, query: str, page: int) -> list[SearchResult]:
        return await asyncio.wait_for(
            self._provider.search_multi(query, page=page),
            timeout=self._timeout,
        )

    async def _fetch_pages(self, query: str) -> list[SearchResult]:
        """Recupere les pages en parallele et les fusionne sans doublons."""
        outcomes = await asyncio.gather(
            *(self._fetch_page(query, page) for page in range(1, self._pages + 1)),
            return_exceptions=True,
        )

        merged: list[SearchResult] = []
        seen: set[tuple[str, int]] = set()

        for page, outcome in enumerate(outcomes, start=1):
            if isinstance(outcome, (ProviderUnavailableError, asyncio.TimeoutError)):
                if page == 1:
                    logger.warning(f"Recherche {query!r} impossible: {outcome!r}")
                    return []
                logger.info(f"Page {page} de {query!r} ignoree: {outcome!r}")
                continue
            if isinstance(outcome, BaseException):
                raise outcome

            for result in outcome:
                key = (result.media_type, result.provider_id)
                if key in seen:
                    continue
                seen.add(key)
                merged.append(result)

        return merged

    def _is_displayable(self, result: SearchResult, content_filter: bool) -> bool:
        """Filtre de qualite : type supporte, note positive, image, contenu."""
        if result.media_kind not in SUPPORTED_KINDS:
            return False
        if not result.provider_rating or result.provider_rating <= 0:
            return False
        if not result.has_image:
            return False
        return self._classifier.is_appropriate(
            result.title, result.overview, enabled=content_filter
        )

    async def _enrich_prefix(self, results: list[SearchResult]) -> list[SearchResult]:
        """
        Enrichit les enrich_limit premiers resultats en parallele.

        Tous les appels sont termines (succes ou None) avant le retour ;
        les resultats suivants gardent une distribution vide.
        """
        head = results[:self._enrich_limit]
        tail = results[self._enrich_limit:]

        credits_list = await asyncio.gather(
            *(self._enricher.enrich(r.provider_id, r.media_kind) for r in head)
        )

        enriched = []
        for result, credits in zip(head, credits_list):
            if credits is None:
                enriched.append(replace(result, cast=(), director=None))
            else:
                enriched.append(replace(result, cast=credits.cast, director=credits.director))

        enriched.extend(replace(r, cast=(), director=None) for r in tail)
        return enriched

    def _with_genres(self, result: SearchResult) -> SearchResult:
        return replace(
            result,
            genres=self._genre_resolver.resolve(result.genre_ids, result.media_kind),
        )
