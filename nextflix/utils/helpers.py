"""
Fonctions utilitaires d'affichage.

Les references d'image sont stockees en chemins relatifs TMDB ; l'URL
complete n'est construite qu'au moment de l'affichage.
"""

from typing import Optional

from nextflix.utils.constants import TMDB_IMAGE_BASE_URL, TMDB_IMAGE_BASE_URL_HIRES


def image_url(ref: Optional[str], hires: bool = False) -> Optional[str]:
    """
    Construit l'URL d'une image TMDB.

    Args:
        ref: Chemin relatif (ex: "/abc.jpg"), ou None
        hires: Utiliser la taille w1280 au lieu de w500

    Returns:
        URL complete, ou None sans reference
    """
    if not ref:
        return None
    base = TMDB_IMAGE_BASE_URL_HIRES if hires else TMDB_IMAGE_BASE_URL
    if not ref.startswith("/"):
        ref = f"/{ref}"
    return f"{base}{ref}"
