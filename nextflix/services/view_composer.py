"""
Projection filtree et triee de la collection.

Les filtres se combinent par ET ; les tris sont stables (l'ordre de la
collection est conserve en cas d'egalite), ce qui garde l'ordre "plus recent
en tete" pour les entrees ajoutees le meme jour.
"""

import unicodedata
from collections.abc import Iterable, Sequence
from typing import Optional

from nextflix.core.entities.collection import CollectionEntry, MediaKind, UserRating
from nextflix.core.ports.heuristics import IContentClassifier
from nextflix.core.value_objects.view_options import (
    CollectionStats,
    RatingFilter,
    SortKey,
    TypeFilter,
    ViewOptions,
)
from nextflix.services.content_classifier import KeywordContentClassifier


def _title_sort_key(entry: CollectionEntry) -> str:
    """Cle de tri alphabetique insensible a la casse et aux accents."""
    decomposed = unicodedata.normalize("NFKD", entry.title)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold()


def _matches_text(entry: CollectionEntry, needle: str) -> bool:
    if needle in entry.title.lower() or needle in (entry.overview or "").lower():
        return True
    if any(needle in name.lower() for name in entry.cast or ()):
        return True
    return any(needle in genre.lower() for genre in entry.genres or ())


class ViewComposer:
    """
    Derive la vue affichee a partir des entrees de la collection.

    Example:
        composer = ViewComposer()
        visible = composer.project(store.entries, ViewOptions(sort_key=SortKey.TITLE))
    """

    def __init__(self, classifier: Optional[IContentClassifier] = None) -> None:
        self._classifier = classifier or KeywordContentClassifier()

    def project(
        self,
        entries: Iterable[CollectionEntry],
        options: ViewOptions = ViewOptions(),
    ) -> list[CollectionEntry]:
        """
        Filtre puis trie les entrees.

        Args:
            entries: Entrees dans l'ordre de la collection
            options: Filtres, texte recherche et cle de tri

        Returns:
            Nouvelle liste ordonnee ; les entrees ne sont pas copiees
        """
        needle = options.search_text.strip().lower()
        visible = [
            entry for entry in entries
            if self._passes(entry, options, needle)
        ]
        return self._sort(visible, options.sort_key)

    def _passes(self, entry: CollectionEntry, options: ViewOptions, needle: str) -> bool:
        if options.type_filter is not TypeFilter.ALL:
            if entry.media_kind is not MediaKind(options.type_filter.value):
                return False
        if options.rating_filter is not RatingFilter.ALL:
            if entry.user_rating is not UserRating(options.rating_filter.value):
                return False
        if needle and not _matches_text(entry, needle):
            return False
        return self._classifier.is_appropriate(
            entry.title, entry.overview, enabled=options.content_filter
        )

    @staticmethod
    def _sort(entries: list[CollectionEntry], sort_key: SortKey) -> list[CollectionEntry]:
        if sort_key is SortKey.TITLE:
            return sorted(entries, key=_title_sort_key)
        if sort_key is SortKey.YEAR:
            return sorted(entries, key=lambda e: e.release_date or "", reverse=True)
        if sort_key is SortKey.RATING:
            return sorted(entries, key=lambda e: e.provider_rating or 0.0, reverse=True)
        return sorted(entries, key=lambda e: e.date_added, reverse=True)

    @staticmethod
    def stats(entries: Sequence[CollectionEntry]) -> CollectionStats:
        """Compteurs par type et par note de la collection complete."""
        return CollectionStats(
            total=len(entries),
            movies=sum(1 for e in entries if e.media_kind is MediaKind.MOVIE),
            series=sum(1 for e in entries if e.media_kind is MediaKind.SERIES),
            love=sum(1 for e in entries if e.user_rating is UserRating.LOVE),
            up=sum(1 for e in entries if e.user_rating is UserRating.UP),
            down=sum(1 for e in entries if e.user_rating is UserRating.DOWN),
        )
