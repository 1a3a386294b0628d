"""
Modeles SQLModel pour la base de donnees NextFlix.

Ces modeles representent les tables de la base de donnees SQLite.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- key_values: Valeurs texte indexees par cle (collection serialisee en JSON,
  etat du filtre de contenu, horodatage du dernier ajout)
"""

from datetime import datetime

from sqlmodel import Field, SQLModel


class KeyValueModel(SQLModel, table=True):
    """Une entree du stockage cle-valeur."""

    __tablename__ = "key_values"

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=datetime.utcnow)
