"""
Interface port pour le stockage clé-valeur.

La collection, l'état du filtre de contenu et l'horodatage du dernier ajout
sont persistés sous trois clés indépendantes. Les implémentations fournissent
un stockage SQLite (SQLModel) et un stockage en mémoire pour les tests.
"""

from abc import ABC, abstractmethod
from typing import Optional


class IKeyValueStore(ABC):
    """
    Interface de stockage clé-valeur de chaînes.

    Les valeurs sont opaques pour le stockage : la sérialisation est faite
    par les services appelants.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retourne la valeur associée à la clé, ou None si absente."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Associe la valeur à la clé (insertion ou remplacement)."""
        ...
