"""
Service de collection : source de verite des titres vus.

CollectionStore detient la liste ordonnee des entrees (la plus recente en
tete) et la persiste en JSON dans le stockage cle-valeur injecte.

Responsabilites:
- Charger la collection persistee (avec politique de recuperation)
- Ajouter, noter, supprimer des entrees
- Migrer les anciennes entrees (champs manquants) par heuristique
- Ne jamais ecrire avant la fin du chargement initial
"""

import json
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional

from loguru import logger

from nextflix.core.entities.collection import CollectionEntry, UserRating
from nextflix.core.ports.api_clients import SearchResult
from nextflix.core.ports.heuristics import IFieldBackfiller
from nextflix.core.ports.key_value_store import IKeyValueStore
from nextflix.services.backfill import HeuristicFieldBackfiller
from nextflix.services.genre_resolver import GenreResolver
from nextflix.utils.constants import (
    STORAGE_KEY_COLLECTION,
    STORAGE_KEY_CORRUPT_SUFFIX,
    STORAGE_KEY_LAST_ADDED,
)


def _new_local_id() -> str:
    return uuid.uuid4().hex


class CollectionStore:
    """
    Collection ordonnee des titres vus, persistee a chaque mutation.

    Le cycle de vie attendu est : load() puis backfill_missing_fields() au
    demarrage, puis les operations utilisateur. Les mutations effectuees
    avant load() restent en memoire mais ne sont pas ecrites, pour ne pas
    ecraser des donnees persistees pas encore lues.

    Example:
        store = CollectionStore(kv_store)
        store.load()
        store.backfill_missing_fields()
        entry = store.add(result, UserRating.UP)
        store.update_rating(entry.local_id, UserRating.LOVE)
    """

    def __init__(
        self,
        kv_store: IKeyValueStore,
        backfiller: Optional[IFieldBackfiller] = None,
        genre_resolver: Optional[GenreResolver] = None,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = _new_local_id,
    ) -> None:
        """
        Initialise la collection (vide tant que load() n'est pas appele).

        Args:
            kv_store: Stockage cle-valeur de persistance
            backfiller: Heuristique de deduction des champs manquants
            genre_resolver: Resolution des codes de genre (repli de add)
            clock: Source de l'heure courante
            id_factory: Generateur d'identifiants locaux
        """
        self._kv_store = kv_store
        self._backfiller = backfiller or HeuristicFieldBackfiller()
        self._genre_resolver = genre_resolver or GenreResolver()
        self._clock = clock
        self._id_factory = id_factory
        self._entries: list[CollectionEntry] = []
        self._loaded = False
        self.recovered_from_corrupt = False

    @property
    def is_loaded(self) -> bool:
        """Vrai une fois le chargement initial termine."""
        return self._loaded

    @property
    def entries(self) -> tuple[CollectionEntry, ...]:
        """Entrees dans l'ordre de la collection (plus recente en tete)."""
        return tuple(self._entries)

    @property
    def last_added(self) -> Optional[str]:
        """Horodatage ISO du dernier ajout, None si aucun."""
        return self._kv_store.get(STORAGE_KEY_LAST_ADDED)

    def get(self, local_id: str) -> Optional[CollectionEntry]:
        """Retourne l'entree d'ID local donne, ou None."""
        for entry in self._entries:
            if entry.local_id == local_id:
                return entry
        return None

    # ------------------------------------------------------------------
    # Chargement et persistance
    # ------------------------------------------------------------------

    def load(self) -> None:
        """
        Charge la collection persistee puis autorise les ecritures.

        Politique de recuperation :
        - Payload illisible (JSON invalide ou pas une liste) : copie brute
          conservee sous la cle "<cle>.corrupt", collection vide,
          recovered_from_corrupt passe a True
        - Entree individuelle invalide ou ID local en double : ignoree, la
          copie brute est conservee de la meme facon
        - Champ optionnel inexploitable : lu comme absent, l'entree est gardee
        """
        raw = self._kv_store.get(STORAGE_KEY_COLLECTION)
        self._entries = self._decode(raw) if raw is not None else []
        self._loaded = True
        logger.info(f"Collection chargee: {len(self._entries)} entree(s)")

    def _decode(self, raw: str) -> list[CollectionEntry]:
        try:
            payload = json.loads(raw)
        except ValueError:
            payload = None

        if not isinstance(payload, list):
            self._quarantine(raw, "Collection persistee illisible, demarrage avec une collection vide")
            return []

        entries: list[CollectionEntry] = []
        seen_ids: set[str] = set()
        skipped = 0
        for index, item in enumerate(payload):
            entry = self._decode_entry(index, item)
            if entry is None:
                skipped += 1
                continue
            if entry.local_id in seen_ids:
                logger.warning(f"Entree {index} ignoree: ID local {entry.local_id} en double")
                skipped += 1
                continue
            seen_ids.add(entry.local_id)
            entries.append(entry)

        if skipped:
            self._quarantine(raw, f"{skipped} entree(s) illisible(s) ecartee(s)")
        return entries

    @staticmethod
    def _decode_entry(index: int, item: Any) -> Optional[CollectionEntry]:
        if not isinstance(item, dict):
            logger.warning(f"Entree {index} ignoree: objet attendu, {type(item).__name__} recu")
            return None
        try:
            return CollectionEntry.from_dict(item)
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"Entree {index} ignoree: {type(e).__name__}: {e}")
            return None

    def _quarantine(self, raw: str, reason: str) -> None:
        """Conserve la copie brute du payload avant toute reecriture."""
        backup_key = STORAGE_KEY_COLLECTION + STORAGE_KEY_CORRUPT_SUFFIX
        logger.warning(f"{reason} : copie brute conservee sous {backup_key!r}")
        self._kv_store.set(backup_key, raw)
        self.recovered_from_corrupt = True

    def _persist(self) -> None:
        """Ecrit la collection complete (ignore avant la fin du chargement)."""
        if not self._loaded:
            logger.debug("Ecriture ignoree : collection pas encore chargee")
            return
        payload = json.dumps([entry.to_dict() for entry in self._entries], ensure_ascii=False)
        self._kv_store.set(STORAGE_KEY_COLLECTION, payload)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, result: SearchResult, rating: Optional[UserRating] = None) -> CollectionEntry:
        """
        Ajoute un resultat de recherche en tete de collection.

        Les genres resolus du resultat sont copies ; a defaut, ils sont
        recalcules depuis les codes bruts.

        Args:
            result: Resultat de recherche (film ou serie)
            rating: Note initiale, None pour un ajout sans note

        Returns:
            L'entree creee

        Raises:
            ValueError: Si le resultat n'est ni un film ni une serie, ou sans titre
        """
        if result.media_kind is None:
            raise ValueError(f"Type de media non supporte: {result.media_type!r}")
        title = result.title.strip()
        if not title:
            raise ValueError(f"Resultat {result.provider_id} sans titre")

        genres = result.genres
        if genres is None:
            genres = self._genre_resolver.resolve(result.genre_ids, result.media_kind)

        now = self._clock()
        entry = CollectionEntry(
            local_id=self._id_factory(),
            provider_id=result.provider_id,
            title=title,
            media_kind=result.media_kind,
            poster_ref=result.poster_ref,
            backdrop_ref=result.backdrop_ref,
            overview=result.overview,
            release_date=result.release_date,
            user_rating=rating,
            date_added=now.date().isoformat(),
            provider_rating=result.provider_rating,
            cast=tuple(result.cast),
            director=result.director,
            genres=tuple(genres),
        )

        self._entries.insert(0, entry)
        self._persist()
        if self._loaded:
            self._kv_store.set(STORAGE_KEY_LAST_ADDED, now.isoformat())

        logger.info(f"Ajoute: {entry.title} ({entry.media_kind.value}), note={rating}")
        return entry

    def update_rating(self, local_id: str, rating: Optional[UserRating]) -> None:
        """
        Modifie la note d'une entree ; None retire la note.

        Un ID inconnu est ignore (la collection est tout de meme persistee).
        """
        entry = self.get(local_id)
        if entry is not None:
            entry.user_rating = rating
        else:
            logger.debug(f"Note ignoree: ID local inconnu {local_id}")
        self._persist()

    def link_provider_id(self, local_id: str, provider_id: int) -> None:
        """
        Rattache un ID fournisseur a une ancienne entree qui n'en a pas.

        Une entree deja rattachee n'est jamais modifiee.
        """
        entry = self.get(local_id)
        if entry is None or entry.provider_id is not None:
            logger.debug(f"Rattachement ignore pour {local_id}")
            return
        entry.provider_id = provider_id
        logger.info(f"Migration: {entry.title} rattache a l'ID TMDB {provider_id}")
        self._persist()

    def delete(self, local_id: str) -> None:
        """Supprime une entree ; un ID inconnu est ignore."""
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.local_id != local_id]
        if len(self._entries) == before:
            logger.debug(f"Suppression ignoree: ID local inconnu {local_id}")
        self._persist()

    def backfill_missing_fields(self) -> int:
        """
        Complete genres, distribution et realisateur manquants.

        Migration idempotente executee une fois apres load() : les valeurs
        sont deduites du titre et du resume, sans appel au fournisseur. Un
        champ deja present n'est jamais modifie.

        Returns:
            Nombre d'entrees modifiees
        """
        changed = 0
        for entry in self._entries:
            if not entry.missing_fields:
                continue

            derived = self._backfiller.derive(entry.title, entry.overview)
            modified = False

            if entry.genres is None:
                entry.genres = derived.genres
                modified = True
            if entry.cast is None:
                entry.cast = derived.cast
                modified = True
            if entry.director is None and derived.director is not None:
                entry.director = derived.director
                modified = True

            if modified:
                changed += 1

        if changed:
            logger.info(f"Migration: {changed} entree(s) completee(s)")
            self._persist()
        return changed
