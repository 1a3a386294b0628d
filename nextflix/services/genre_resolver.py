"""
Resolution des codes de genre TMDB en noms affiches.

TMDB utilise deux listes de genres : un meme code peut designer des genres
differents selon qu'il s'agit d'un film ou d'une serie (ex: 10765 n'existe
que pour les series). La resolution se fait donc par type de media.
"""

from collections.abc import Iterable

from nextflix.core.entities.collection import MediaKind
from nextflix.utils.constants import TMDB_GENRE_MAPPING, TMDB_TV_GENRE_MAPPING

_TABLES = {
    MediaKind.MOVIE: TMDB_GENRE_MAPPING,
    MediaKind.SERIES: TMDB_TV_GENRE_MAPPING,
}


def resolve_genres(codes: Iterable[int], media_kind: MediaKind) -> tuple[str, ...]:
    """
    Convertit des codes de genre en noms, dans l'ordre du fournisseur.

    Les codes inconnus sont ignores silencieusement et les doublons supprimes.

    Args:
        codes: Codes de genre TMDB
        media_kind: Table a utiliser (films ou series)

    Returns:
        Tuple des noms de genres
    """
    table = _TABLES[media_kind]
    names: list[str] = []
    for code in codes:
        name = table.get(code)
        if name is not None and name not in names:
            names.append(name)
    return tuple(names)


class GenreResolver:
    """Enveloppe injectable de resolve_genres."""

    def resolve(self, codes: Iterable[int], media_kind: MediaKind) -> tuple[str, ...]:
        return resolve_genres(codes, media_kind)
