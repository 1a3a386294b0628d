"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port fournisseur de recherche :
- ISearchProvider : Recherche multi-type paginée et crédits
- SearchResult : Candidat normalisé (film ou série)
- Credits : Distribution et réalisateur enrichis
- ProviderUnavailableError : Fournisseur injoignable

Port stockage : IKeyValueStore
Ports heuristiques : IContentClassifier, IFieldBackfiller, BackfilledFields
Port export : IExportSink, ExportPayload
"""

from nextflix.core.ports.api_clients import (
    Credits,
    ISearchProvider,
    ProviderUnavailableError,
    SearchResult,
)
from nextflix.core.ports.export_sink import ExportPayload, IExportSink
from nextflix.core.ports.heuristics import (
    BackfilledFields,
    IContentClassifier,
    IFieldBackfiller,
)
from nextflix.core.ports.key_value_store import IKeyValueStore

__all__ = [
    # Fournisseur de recherche
    "Credits",
    "ISearchProvider",
    "ProviderUnavailableError",
    "SearchResult",
    # Stockage
    "IKeyValueStore",
    # Heuristiques
    "BackfilledFields",
    "IContentClassifier",
    "IFieldBackfiller",
    # Export
    "ExportPayload",
    "IExportSink",
]
