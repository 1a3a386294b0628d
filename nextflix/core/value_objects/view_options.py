"""
Objets valeur pour la projection de la collection.

Filtres, cle de tri et statistiques utilises par le ViewComposer pour
deriver la vue affichee a partir de la collection.
"""

from dataclasses import dataclass
from enum import Enum


class TypeFilter(Enum):
    """Filtre par type de media."""

    ALL = "all"
    MOVIE = "movie"
    SERIES = "series"


class RatingFilter(Enum):
    """Filtre par note personnelle."""

    ALL = "all"
    LOVE = "love"
    UP = "up"
    DOWN = "down"


class SortKey(Enum):
    """
    Cle de tri de la projection.

    Valeurs:
        DATE_WATCHED: Date d'ajout decroissante (defaut)
        TITLE: Titre croissant, insensible a la casse et aux accents
        YEAR: Date de sortie decroissante (absente = plus ancienne)
        RATING: Note TMDB decroissante (absente = 0), pas la note personnelle
    """

    DATE_WATCHED = "dateWatched"
    TITLE = "title"
    YEAR = "year"
    RATING = "rating"


@dataclass(frozen=True)
class ViewOptions:
    """
    Options de projection de la collection.

    Attributs:
        type_filter: Filtre par type (all, movie, series)
        rating_filter: Filtre par note personnelle (all, love, up, down)
        search_text: Texte recherche dans titre, resume, distribution, genres
        sort_key: Cle de tri
        content_filter: Etat du filtre de contenu de l'utilisateur
    """

    type_filter: TypeFilter = TypeFilter.ALL
    rating_filter: RatingFilter = RatingFilter.ALL
    search_text: str = ""
    sort_key: SortKey = SortKey.DATE_WATCHED
    content_filter: bool = True

    @property
    def is_default(self) -> bool:
        """Vrai si aucun filtre ni tri personnalise n'est actif."""
        return (
            self.type_filter is TypeFilter.ALL
            and self.rating_filter is RatingFilter.ALL
            and not self.search_text.strip()
            and self.sort_key is SortKey.DATE_WATCHED
        )


@dataclass(frozen=True)
class CollectionStats:
    """Compteurs affiches en tete de collection."""

    total: int = 0
    movies: int = 0
    series: int = 0
    love: int = 0
    up: int = 0
    down: int = 0
