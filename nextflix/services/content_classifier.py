"""
Filtre de contenu par mots-cles.

Heuristique grossiere : un titre est masque si son titre ou son resume
contient un mot-cle de la liste d'exclusion (sous-chaine, insensible a la
casse). Les faux positifs et faux negatifs sont acceptes.
"""

from collections.abc import Iterable

from nextflix.core.ports.heuristics import IContentClassifier
from nextflix.utils.constants import CONTENT_DENY_LIST


def is_appropriate(
    title: str,
    overview: str,
    enabled: bool = True,
    deny_list: Iterable[str] = CONTENT_DENY_LIST,
) -> bool:
    """
    Indique si un titre peut etre affiche.

    Args:
        title: Titre du candidat
        overview: Resume du candidat
        enabled: Etat du filtre ; desactive, tout est accepte
        deny_list: Mots-cles d'exclusion

    Returns:
        False si un mot-cle apparait dans le titre ou le resume
    """
    if not enabled:
        return True

    haystacks = ((title or "").lower(), (overview or "").lower())
    for keyword in deny_list:
        needle = keyword.lower()
        if any(needle in text for text in haystacks):
            return False
    return True


class KeywordContentClassifier(IContentClassifier):
    """Implementation de IContentClassifier basee sur la liste d'exclusion."""

    def __init__(self, deny_list: Iterable[str] = CONTENT_DENY_LIST) -> None:
        self._deny_list = tuple(deny_list)

    def is_appropriate(self, title: str, overview: str, enabled: bool = True) -> bool:
        return is_appropriate(title, overview, enabled=enabled, deny_list=self._deny_list)
