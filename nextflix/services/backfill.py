"""
Deduction heuristique des champs manquants des anciennes entrees.

Les entrees creees avant l'ajout des genres, de la distribution et du
realisateur n'ont pas ces champs. Ils sont deduits du titre et du resume par
tables de mots-cles fixes, sans aucun appel au fournisseur.
"""

from nextflix.core.ports.heuristics import BackfilledFields, IFieldBackfiller
from nextflix.utils.constants import BACKFILL_GENRE_KEYWORDS, BACKFILL_TITLE_CREDITS


class HeuristicFieldBackfiller(IFieldBackfiller):
    """
    Implementation de IFieldBackfiller par tables de mots-cles.

    Fonction pure du titre et du resume : deux appels avec les memes
    textes donnent le meme resultat.
    """

    def __init__(
        self,
        genre_keywords: tuple[tuple[str, tuple[str, ...]], ...] = BACKFILL_GENRE_KEYWORDS,
        title_credits: dict[str, tuple[tuple[str, ...], str]] = BACKFILL_TITLE_CREDITS,
    ) -> None:
        self._genre_keywords = genre_keywords
        self._title_credits = title_credits

    def derive(self, title: str, overview: str) -> BackfilledFields:
        text = f"{title} {overview}".lower()
        genres = tuple(
            genre
            for genre, keywords in self._genre_keywords
            if any(keyword in text for keyword in keywords)
        )

        known = self._title_credits.get(title.strip().lower())
        if known is None:
            return BackfilledFields(genres=genres)

        cast, director = known
        return BackfilledFields(genres=genres, cast=tuple(cast), director=director)
