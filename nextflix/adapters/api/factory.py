"""
Selection du fournisseur de recherche selon la configuration.

Sans cle TMDB valide, l'application bascule sur le catalogue hors-ligne
au lieu d'echouer.
"""

from typing import Optional

from loguru import logger

from nextflix.adapters.api.cache import APICache
from nextflix.adapters.api.offline_provider import OfflineSearchProvider
from nextflix.adapters.api.tmdb_client import TMDBClient
from nextflix.config import Settings
from nextflix.core.ports.api_clients import ISearchProvider


def build_search_provider(
    settings: Settings,
    cache: Optional[APICache] = None,
) -> ISearchProvider:
    """
    Construit le fournisseur de recherche.

    Args:
        settings: Configuration de l'application
        cache: Cache partage pour le client TMDB

    Returns:
        TMDBClient si une cle est configuree, OfflineSearchProvider sinon
    """
    if settings.tmdb_enabled:
        return TMDBClient(
            api_key=settings.tmdb_api_key,
            cache=cache,
            language=settings.tmdb_language,
            timeout=settings.provider_timeout,
        )

    logger.info("Aucune cle TMDB configuree : recherche sur le catalogue hors-ligne")
    return OfflineSearchProvider()
