"""
Resolution d'identite entre un candidat et la collection.

L'ID du fournisseur est la cle d'identite de reference. Le titre n'est
jamais utilise pour les recherches courantes : deux oeuvres differentes
peuvent porter le meme titre. La correspondance par titre n'existe que pour
la migration explicite des anciennes entrees sans ID fournisseur.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Optional

from nextflix.core.entities.collection import CollectionEntry, MediaKind
from nextflix.core.ports.api_clients import SearchResult


@dataclass(frozen=True)
class IdentityCandidate:
    """
    Element a rechercher dans la collection.

    Attributs :
        title : Titre affiche (informatif, jamais utilise pour la correspondance)
        media_kind : Type du titre
        provider_id : ID TMDB, cle de reference
        local_id : ID local (vue detail deja ouverte sur une entree)
    """

    title: str
    media_kind: Optional[MediaKind] = None
    provider_id: Optional[int] = None
    local_id: Optional[str] = None

    @classmethod
    def from_search_result(cls, result: SearchResult) -> "IdentityCandidate":
        return cls(
            title=result.title,
            media_kind=result.media_kind,
            provider_id=result.provider_id,
        )

    @classmethod
    def from_entry(cls, entry: CollectionEntry) -> "IdentityCandidate":
        return cls(
            title=entry.title,
            media_kind=entry.media_kind,
            provider_id=entry.provider_id,
            local_id=entry.local_id,
        )


class IdentityResolver:
    """
    Retrouve l'entree existante correspondant a un candidat.

    Example:
        resolver = IdentityResolver(lambda: store.entries)
        existing = resolver.find_existing(IdentityCandidate.from_search_result(result))
        if existing is None:
            store.add(result, rating)
        else:
            store.update_rating(existing.local_id, rating)
    """

    def __init__(self, entries: Callable[[], Iterable[CollectionEntry]]) -> None:
        """
        Args:
            entries: Retourne l'etat courant de la collection
        """
        self._entries = entries

    def find_existing(self, candidate: IdentityCandidate) -> Optional[CollectionEntry]:
        """
        Cherche le candidat dans la collection, premiere regle gagnante :

        1. provider_id present : correspondance sur provider_id uniquement
        2. sinon local_id present : correspondance sur local_id
        3. sinon : aucune correspondance

        Returns:
            L'entree existante, ou None si le titre n'est pas encore collectionne
        """
        if candidate.provider_id is not None:
            for entry in self._entries():
                if entry.provider_id == candidate.provider_id:
                    return entry
            return None

        if candidate.local_id is not None:
            for entry in self._entries():
                if entry.local_id == candidate.local_id:
                    return entry

        return None

    def find_legacy_match(self, title: str, media_kind: MediaKind) -> Optional[CollectionEntry]:
        """
        Correspondance par titre reservee a la migration des anciennes entrees.

        Ne considere que les entrees sans provider_id ; comparaison du titre
        insensible a la casse et aux espaces de bordure, type identique.
        """
        wanted = title.strip().casefold()
        for entry in self._entries():
            if entry.provider_id is not None:
                continue
            if entry.media_kind is media_kind and entry.title.strip().casefold() == wanted:
                return entry
        return None
