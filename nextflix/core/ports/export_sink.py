"""
Interface port pour la destination des exports.

Le moteur produit uniquement le contenu des fichiers ; la livraison
(écriture sur disque, téléchargement) est faite par un adaptateur.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExportPayload:
    """
    Fichier d'export prêt à livrer.

    Attributs :
        filename : Nom déterministe (ex: nextflix-collection-2024-05-01.csv)
        content : Contenu texte du fichier
        media_type : Type MIME (text/csv, application/json, text/plain)
    """

    filename: str
    content: str
    media_type: str


class IExportSink(ABC):
    """Destination des fichiers d'export."""

    @abstractmethod
    def write(self, payload: ExportPayload) -> Path:
        """Livre le fichier et retourne son emplacement."""
        ...
