"""
Preferences utilisateur persistees.

Seul l'etat du filtre de contenu est conserve, sous sa propre cle du
stockage cle-valeur ("true" / "false", active par defaut).
"""

from nextflix.core.ports.key_value_store import IKeyValueStore
from nextflix.utils.constants import STORAGE_KEY_CONTENT_FILTER


class PreferencesService:
    """Lecture et ecriture du filtre de contenu."""

    def __init__(self, kv_store: IKeyValueStore) -> None:
        self._kv_store = kv_store

    @property
    def content_filter_enabled(self) -> bool:
        """Active sauf si la valeur persistee vaut explicitement "false"."""
        value = self._kv_store.get(STORAGE_KEY_CONTENT_FILTER)
        if value is None:
            return True
        return value.strip().lower() != "false"

    def set_content_filter(self, enabled: bool) -> None:
        self._kv_store.set(STORAGE_KEY_CONTENT_FILTER, "true" if enabled else "false")
