"""
Utilitaires et constantes pour NextFlix.

Ce module contient les constantes et fonctions utilitaires partagees.
"""

from nextflix.utils.constants import (
    CONTENT_DENY_LIST,
    TMDB_GENRE_MAPPING,
    TMDB_TV_GENRE_MAPPING,
)
from nextflix.utils.helpers import image_url

__all__ = [
    "CONTENT_DENY_LIST",
    "TMDB_GENRE_MAPPING",
    "TMDB_TV_GENRE_MAPPING",
    "image_url",
]
