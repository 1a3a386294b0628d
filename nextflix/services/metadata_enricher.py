"""
Service d'enrichissement des credits (distribution et realisateur).

Un appel credits par titre : l'enrichissement est donc reserve a un nombre
borne de candidats par le SearchAggregator. Un echec du fournisseur n'est
jamais fatal, il se traduit par None ("enrichissement indisponible").
"""

import asyncio
from typing import Any, Optional

from loguru import logger

from nextflix.core.entities.collection import MediaKind
from nextflix.core.ports.api_clients import (
    Credits,
    ISearchProvider,
    ProviderUnavailableError,
)
from nextflix.utils.constants import CREATOR_SEPARATOR, MAX_CAST_MEMBERS, MAX_SERIES_CREATORS

# Postes retenus comme "createur" pour une serie
SERIES_CREATOR_JOBS = frozenset({"Creator", "Executive Producer"})


def credits_from_payload(data: dict[str, Any], media_kind: MediaKind) -> Credits:
    """
    Extrait distribution et realisateur d'une reponse credits brute.

    - Distribution : les MAX_CAST_MEMBERS premiers noms, ordre du fournisseur
    - Film : premier membre de l'equipe au poste "Director"
    - Serie : deux premiers "Creator"/"Executive Producer", joints par ", "

    Args:
        data: Reponse {"cast": [...], "crew": [...]}
        media_kind: Type du titre

    Returns:
        Credits extraits (director None si aucun poste ne correspond)
    """
    cast_names = [member.get("name") for member in data.get("cast", []) or []]
    cast = tuple(name for name in cast_names if name)[:MAX_CAST_MEMBERS]

    crew = data.get("crew", []) or []
    director: Optional[str] = None

    if media_kind is MediaKind.MOVIE:
        for member in crew:
            if member.get("job") == "Director" and member.get("name"):
                director = member["name"]
                break
    else:
        creators: list[str] = []
        for member in crew:
            name = member.get("name")
            if member.get("job") in SERIES_CREATOR_JOBS and name and name not in creators:
                creators.append(name)
        if creators:
            director = CREATOR_SEPARATOR.join(creators[:MAX_SERIES_CREATORS])

    return Credits(cast=cast, director=director)


class MetadataEnricher:
    """
    Enrichit un titre avec ses credits via le fournisseur.

    Attributes:
        DEFAULT_TIMEOUT: Delai maximum d'un appel credits en secondes

    Example:
        enricher = MetadataEnricher(provider, timeout=10.0)
        credits = await enricher.enrich(27205, MediaKind.MOVIE)
        if credits is not None:
            print(credits.director)
    """

    DEFAULT_TIMEOUT: float = 10.0

    def __init__(self, provider: ISearchProvider, timeout: float = DEFAULT_TIMEOUT) -> None:
        """
        Args:
            provider: Fournisseur de recherche (TMDB ou hors-ligne)
            timeout: Delai maximum par appel en secondes
        """
        self._provider = provider
        self._timeout = timeout

    async def enrich(self, provider_id: int, media_kind: MediaKind) -> Optional[Credits]:
        """
        Recupere les credits d'un titre.

        Args:
            provider_id: ID TMDB
            media_kind: Type du titre

        Returns:
            Credits, ou None si le fournisseur est indisponible ou trop lent
        """
        try:
            data = await asyncio.wait_for(
                self._provider.get_credits(provider_id, media_kind),
                timeout=self._timeout,
            )
        except ProviderUnavailableError as e:
            logger.warning(f"Credits indisponibles pour {media_kind.value} {provider_id}: {e}")
            return None
        except asyncio.TimeoutError:
            logger.warning(
                f"Credits de {media_kind.value} {provider_id} : delai de {self._timeout}s depasse"
            )
            return None

        return credits_from_payload(data, media_kind)
