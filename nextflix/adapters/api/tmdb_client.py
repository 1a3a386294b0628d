"""
Client TMDB pour la recherche multi-type et les credits.

Implemente l'interface ISearchProvider pour TMDB (The Movie Database).
Utilise le cache persistant et le mecanisme de retry pour gerer
le rate limiting. Toute autre erreur d'acces est convertie en
ProviderUnavailableError.

Usage:
    cache = APICache()
    client = TMDBClient(api_key="your_key", cache=cache)
    page = await client.search_multi("Inception", page=1)
    credits = await client.get_credits(27205, MediaKind.MOVIE)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from nextflix.adapters.api.cache import APICache
from nextflix.adapters.api.retry import RateLimitError, request_with_retry
from nextflix.adapters.api.tmdb_payloads import parse_search_page
from nextflix.core.entities.collection import MediaKind
from nextflix.core.ports.api_clients import (
    ISearchProvider,
    ProviderUnavailableError,
    SearchResult,
)


class TMDBClient(ISearchProvider):
    """
    Client API TMDB pour la recherche de films et series.

    Implemente ISearchProvider avec:
    - Recherche multi-type paginee (/search/multi)
    - Credits d'un film (/movie/{id}/credits) ou d'une serie (/tv/{id}/credits)
    - Cache persistant (24h pages de recherche, 7j credits)
    - Retry automatique sur rate limiting (429)

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: str,
        cache: Optional[APICache] = None,
        language: str = "en-US",
        timeout: float = 10.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
            cache: Instance APICache (optionnelle)
            language: Langue des titres et resumes
            timeout: Timeout HTTP en secondes
        """
        self._api_key = api_key
        self._cache = cache
        self._language = language
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}

            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    async def _get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Execute un GET et decode le JSON.

        Raises:
            ProviderUnavailableError: Erreur reseau, statut non-succes,
                rate limiting persistant ou corps illisible
        """
        client = self._get_client()
        try:
            response = await request_with_retry(client, "GET", url, params=params)
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.debug(f"TMDB {url} -> HTTP {e.response.status_code}")
            raise ProviderUnavailableError(
                f"TMDB a repondu {e.response.status_code} pour {url}"
            ) from e
        except (httpx.HTTPError, RateLimitError) as e:
            logger.debug(f"TMDB {url} -> {type(e).__name__}: {e}")
            raise ProviderUnavailableError(f"TMDB injoignable pour {url}: {e}") from e
        except ValueError as e:
            raise ProviderUnavailableError(f"Reponse TMDB illisible pour {url}") from e

    async def search_multi(self, query: str, page: int = 1) -> list[SearchResult]:
        """
        Recherche multi-type (films, series, personnes) paginee.

        Utilise le pattern cache-first: verifie le cache AVANT de faire
        un appel API. Les pages sont cachees pour 24 heures.

        Args:
            query: Texte recherche
            page: Numero de page (1-indexe)

        Returns:
            Liste de SearchResult de la page (vide si aucun resultat)
        """
        cache_key = APICache.search_key(self.source, query, page)

        if self._cache is not None:
            cached = await self._cache.get(cache_key)
            if cached is not None:
                return cached

        logger.debug(f"TMDB search/multi: {query!r} page {page}")
        data = await self._get_json(
            "/search/multi",
            params={
                "query": query,
                "page": page,
                "language": self._language,
                "include_adult": "false",
            },
        )
        results = parse_search_page(data)

        if self._cache is not None:
            await self._cache.set_search(cache_key, results)

        return results

    async def get_credits(self, provider_id: int, media_kind: MediaKind) -> dict[str, Any]:
        """
        Recupere les credits (cast et crew) d'un film ou d'une serie.

        Args:
            provider_id: ID TMDB
            media_kind: MOVIE -> /movie/{id}/credits, SERIES -> /tv/{id}/credits

        Returns:
            Dictionnaire brut {"cast": [...], "crew": [...]}
        """
        endpoint = "movie" if media_kind is MediaKind.MOVIE else "tv"
        cache_key = APICache.credits_key(self.source, endpoint, provider_id)

        if self._cache is not None:
            cached = await self._cache.get(cache_key)
            if cached is not None:
                return cached

        data = await self._get_json(
            f"/{endpoint}/{provider_id}/credits",
            params={"language": self._language},
        )
        credits = {
            "cast": data.get("cast", []) or [],
            "crew": data.get("crew", []) or [],
        }

        if self._cache is not None:
            await self._cache.set_credits(cache_key, credits)

        return credits

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
