"""
Interfaces ports pour le fournisseur de recherche.

Interfaces abstraites (ports) définissant le contrat avec le fournisseur de
métadonnées externe. Les implémentations (adaptateurs) sont le client TMDB
et le jeu de données hors-ligne utilisé sans clé API.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from nextflix.core.entities.collection import MediaKind


class ProviderUnavailableError(Exception):
    """
    Le fournisseur de recherche n'a pas pu répondre.

    Levée pour les erreurs réseau, les statuts HTTP non-succès et les délais
    dépassés. Les services la rattrapent toujours localement : elle n'est
    jamais propagée à l'appelant de la recherche.
    """


@dataclass
class SearchResult:
    """
    Résultat de recherche depuis le fournisseur (éphémère, jamais persisté).

    Les formes film et série sont normalisées : `title` vaut title ou name,
    `release_date` vaut release_date ou first_air_date.

    Attributs :
        provider_id : ID TMDB
        title : Titre affiché
        media_type : Type brut du fournisseur ("movie", "tv", "person"...)
        media_kind : Type normalisé, None pour les types non supportés
        poster_ref : Chemin relatif du poster
        backdrop_ref : Chemin relatif de l'image de fond
        overview : Résumé
        release_date : Date de sortie / première diffusion
        provider_rating : Note moyenne TMDB (0-10)
        genre_ids : Codes de genre bruts
        genres : Noms de genres résolus (None tant que non résolus)
        cast : Distribution enrichie
        director : Réalisateur / créateur(s) enrichi(s)
    """

    provider_id: int
    title: str
    media_type: str = ""
    media_kind: Optional[MediaKind] = None
    poster_ref: Optional[str] = None
    backdrop_ref: Optional[str] = None
    overview: str = ""
    release_date: Optional[str] = None
    provider_rating: Optional[float] = None
    genre_ids: tuple[int, ...] = ()
    genres: Optional[tuple[str, ...]] = None
    cast: tuple[str, ...] = ()
    director: Optional[str] = None

    @property
    def has_image(self) -> bool:
        """Vrai si au moins une référence d'image est présente."""
        return bool(self.poster_ref or self.backdrop_ref)


@dataclass(frozen=True)
class Credits:
    """
    Crédits enrichis d'un titre.

    Attributs :
        cast : Noms des acteurs principaux, dans l'ordre du fournisseur (≤ 10)
        director : Réalisateur (films) ou créateurs joints (séries), None si aucun
    """

    cast: tuple[str, ...] = ()
    director: Optional[str] = None


class ISearchProvider(ABC):
    """
    Interface du fournisseur de recherche multi-type.

    Définit le contrat pour rechercher des titres (films et séries) et
    récupérer leurs crédits. Les implémentations convertissent toute erreur
    d'accès en ProviderUnavailableError.
    """

    @abstractmethod
    async def search_multi(self, query: str, page: int = 1) -> list[SearchResult]:
        """
        Recherche multi-type paginée.

        Args :
            query : Texte recherché
            page : Numéro de page (1-indexé)

        Retourne :
            Candidats bruts de la page, dans l'ordre de pertinence du fournisseur
        """
        ...

    @abstractmethod
    async def get_credits(self, provider_id: int, media_kind: MediaKind) -> dict[str, Any]:
        """
        Récupère les crédits bruts d'un titre.

        Args :
            provider_id : ID TMDB
            media_kind : Type du titre (choisit l'endpoint movie ou tv)

        Retourne :
            Dictionnaire {"cast": [{"name": ...}], "crew": [{"name": ..., "job": ...}]}
        """
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source (ex: 'tmdb', 'offline')."""
        ...

    async def close(self) -> None:
        """Libère les ressources réseau (rien à faire par défaut)."""
        return None
