"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- TypeFilter, RatingFilter, SortKey : Options de filtrage et de tri
- ViewOptions : Combinaison des options de projection
- CollectionStats : Compteurs de la collection
"""

from nextflix.core.value_objects.view_options import (
    CollectionStats,
    RatingFilter,
    SortKey,
    TypeFilter,
    ViewOptions,
)

__all__ = [
    "CollectionStats",
    "RatingFilter",
    "SortKey",
    "TypeFilter",
    "ViewOptions",
]
