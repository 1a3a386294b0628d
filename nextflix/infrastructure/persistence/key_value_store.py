"""
Implementations du stockage cle-valeur.

SQLModelKeyValueStore persiste dans SQLite (une ligne par cle) ;
InMemoryKeyValueStore sert aux tests et aux sessions ephemeres.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Engine
from sqlmodel import Session

from nextflix.core.ports.key_value_store import IKeyValueStore
from nextflix.infrastructure.persistence.models import KeyValueModel


class SQLModelKeyValueStore(IKeyValueStore):
    """
    Stockage cle-valeur SQLite.

    Chaque operation ouvre une session courte : le moteur n'a qu'un seul
    chemin de mutation a la fois.
    """

    def __init__(self, engine: Engine) -> None:
        """
        Args :
            engine : Engine SQLAlchemy dont les tables sont initialisees
        """
        self._engine = engine

    def get(self, key: str) -> Optional[str]:
        with Session(self._engine) as session:
            model = session.get(KeyValueModel, key)
            return model.value if model is not None else None

    def set(self, key: str, value: str) -> None:
        with Session(self._engine) as session:
            model = session.get(KeyValueModel, key)
            if model is None:
                model = KeyValueModel(key=key, value=value)
            else:
                model.value = value
                model.updated_at = datetime.utcnow()
            session.add(model)
            session.commit()


class InMemoryKeyValueStore(IKeyValueStore):
    """Stockage cle-valeur en memoire."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})
        self.writes: list[str] = []

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append(key)
        self._data[key] = value
