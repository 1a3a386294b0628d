"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe NEXTFLIX_,
et peut optionnellement être fournie via un fichier .env.

La clé API TMDB est optionnelle - sans clé, la recherche bascule sur le jeu de
données hors-ligne déterministe.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de nextflix/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Valeurs de remplacement livrees dans les exemples de configuration
_PLACEHOLDER_KEYS = frozenset({"", "demo_key", "your_api_key_here"})


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe NEXTFLIX_.
    Exemple : NEXTFLIX_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="NEXTFLIX_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
    )

    # Base de données (stockage cle-valeur de la collection)
    database_url: str = Field(default="sqlite:///nextflix.db")

    # Clé API (OPTIONNELLE - mode hors-ligne si non définie)
    tmdb_api_key: Optional[str] = Field(default=None)
    tmdb_language: str = Field(default="en-US")

    # Cache API
    cache_dir: Path = Field(default=Path(".cache/api"))

    # Recherche
    search_pages: int = Field(default=2, ge=1, le=5)
    enrich_limit: int = Field(default=10, ge=0)
    provider_timeout: float = Field(default=10.0, gt=0)
    debounce_seconds: float = Field(default=0.5, ge=0)

    # Export
    export_dir: Path = Field(default=Path("~/Downloads"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/nextflix.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "export_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si une vraie clé TMDB est configurée."""
        if self.tmdb_api_key is None:
            return False
        return self.tmdb_api_key.strip() not in _PLACEHOLDER_KEYS
