"""
Cache persistant des reponses du fournisseur de recherche.

Le cache utilise diskcache pour la persistence sur disque : une recherche
retapee ou un titre deja enrichi ne coute pas de nouvel appel TMDB, meme
apres redemarrage.

TTL par defaut:
- Pages de recherche (SEARCH_TTL): 24 heures - la pertinence evolue vite
- Credits (CREDITS_TTL): 7 jours - la distribution d'un titre change rarement
"""

import asyncio
from functools import partial
from typing import Any, Optional

from diskcache import Cache


class APICache:
    """
    Cache asynchrone avec TTL pour les appels au fournisseur.

    Les operations diskcache sont bloquantes : elles sont executees dans
    l'executor par defaut pour ne pas bloquer la boucle d'evenements pendant
    les recherches concurrentes.

    Example:
        cache = APICache(cache_dir=".cache/api")
        key = APICache.search_key("tmdb", "inception", page=1)
        await cache.set_search(key, results)
        data = await cache.get(key)
    """

    SEARCH_TTL = 24 * 60 * 60  # 24 heures en secondes (86400)
    CREDITS_TTL = 7 * 24 * 60 * 60  # 7 jours en secondes (604800)

    def __init__(self, cache_dir: str = ".cache/api") -> None:
        """
        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(str(cache_dir))

    @staticmethod
    def search_key(source: str, query: str, page: int) -> str:
        """Cle d'une page de recherche, normalisee sur la casse et les espaces."""
        normalized = " ".join(query.lower().split())
        return f"{source}:search:{normalized}:{page}"

    @staticmethod
    def credits_key(source: str, media_kind: str, provider_id: int) -> str:
        """Cle des credits d'un titre."""
        return f"{source}:credits:{media_kind}:{provider_id}"

    async def get(self, key: str) -> Optional[Any]:
        """
        Recupere une valeur du cache.

        Returns:
            La valeur stockee ou None si absente ou expiree
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, value: Any, ttl: int) -> None:
        """Stocke une valeur avec une duree de vie en secondes."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, value, expire=ttl)
        )

    async def set_search(self, key: str, value: Any) -> None:
        """Stocke une page de recherche (TTL de 24h)."""
        await self.set(key, value, self.SEARCH_TTL)

    async def set_credits(self, key: str, value: Any) -> None:
        """Stocke les credits d'un titre (TTL de 7 jours)."""
        await self.set(key, value, self.CREDITS_TTL)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()
