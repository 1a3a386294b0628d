"""
Normalisation des reponses TMDB en SearchResult.

La recherche multi-type de TMDB melange films, series et personnes avec des
noms de champs differents (title/name, release_date/first_air_date). Ce
module ramene ces formes a un SearchResult unique ; il est partage par le
client TMDB et le jeu de donnees hors-ligne, qui stocke ses titres au format
TMDB.
"""

from typing import Any, Optional

from nextflix.core.entities.collection import MediaKind
from nextflix.core.ports.api_clients import SearchResult


def _clean_ref(value: Any) -> Optional[str]:
    """Les chemins d'image vides ou nuls sont traites comme absents."""
    if not value:
        return None
    return str(value)


def parse_search_item(item: dict[str, Any]) -> Optional[SearchResult]:
    """
    Convertit un element de /search/multi en SearchResult.

    Args:
        item: Element brut de la liste "results"

    Returns:
        SearchResult normalise, ou None si l'element n'a pas d'ID
    """
    raw_id = item.get("id")
    if raw_id is None:
        return None

    media_type = item.get("media_type", "")
    title = item.get("title") or item.get("name") or ""
    release_date = item.get("release_date") or item.get("first_air_date") or None

    vote_average = item.get("vote_average")

    return SearchResult(
        provider_id=int(raw_id),
        title=title,
        media_type=media_type,
        media_kind=MediaKind.from_provider_type(media_type),
        poster_ref=_clean_ref(item.get("poster_path")),
        backdrop_ref=_clean_ref(item.get("backdrop_path")),
        overview=item.get("overview") or "",
        release_date=release_date,
        provider_rating=float(vote_average) if vote_average is not None else None,
        genre_ids=tuple(int(code) for code in item.get("genre_ids", []) or []),
    )


def parse_search_page(data: dict[str, Any]) -> list[SearchResult]:
    """Convertit une page /search/multi complete, en conservant l'ordre."""
    results = []
    for item in data.get("results", []) or []:
        parsed = parse_search_item(item)
        if parsed is not None:
            results.append(parsed)
    return results
