"""
Adaptateurs du fournisseur de recherche.

- TMDBClient : client httpx de l'API TMDB v3
- OfflineSearchProvider : catalogue fixe utilise sans cle API
- APICache : cache disque des pages de recherche et des credits
- build_search_provider : selection selon la configuration
"""

from nextflix.adapters.api.cache import APICache
from nextflix.adapters.api.factory import build_search_provider
from nextflix.adapters.api.offline_provider import OfflineSearchProvider
from nextflix.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "APICache",
    "OfflineSearchProvider",
    "TMDBClient",
    "build_search_provider",
]
