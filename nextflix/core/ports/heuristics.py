"""
Interfaces ports pour les heuristiques remplaçables.

Le filtre de contenu et la migration des champs manquants sont des
heuristiques par mots-clés. Ces interfaces permettent de les remplacer
(classifieur réel, enrichissement via le fournisseur) sans toucher au
CollectionStore ni au SearchAggregator.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class BackfilledFields:
    """
    Valeurs déduites pour les champs manquants d'une entrée.

    Attributs :
        genres : Genres déduits (tuple vide si rien trouvé)
        cast : Distribution déduite (tuple vide si rien trouvé)
        director : Réalisateur déduit, None si inconnu
    """

    genres: tuple[str, ...] = ()
    cast: tuple[str, ...] = ()
    director: Optional[str] = None


class IContentClassifier(ABC):
    """Décide si un titre peut être affiché."""

    @abstractmethod
    def is_appropriate(self, title: str, overview: str, enabled: bool = True) -> bool:
        """
        Args :
            title : Titre du candidat
            overview : Résumé du candidat
            enabled : État du filtre ; False laisse tout passer

        Retourne :
            False si le titre doit être masqué
        """
        ...


class IFieldBackfiller(ABC):
    """Déduit les champs manquants d'une entrée sans appel au fournisseur."""

    @abstractmethod
    def derive(self, title: str, overview: str) -> BackfilledFields:
        """Déduit genres, distribution et réalisateur du titre et du résumé."""
        ...
