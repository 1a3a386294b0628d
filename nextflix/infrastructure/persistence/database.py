"""
Configuration de la base de donnees SQLite pour NextFlix.

Ce module fournit :
- Creation de l'engine SQLite a partir de l'URL configuree
- Fonction d'initialisation des tables

L'engine est cree par le container et injecte dans le stockage cle-valeur ;
aucun etat global n'est conserve ici.
"""

from pathlib import Path

from sqlalchemy import Engine
from sqlmodel import SQLModel, create_engine


def create_db_engine(database_url: str) -> Engine:
    """
    Cree l'engine SQLite.

    Cree le repertoire parent si l'URL designe un fichier SQLite.

    Args:
        database_url: URL SQLAlchemy (ex: sqlite:///nextflix.db)
    """
    if database_url.startswith("sqlite:///") and not database_url.startswith("sqlite:///:memory:"):
        db_path = Path(database_url.replace("sqlite:///", ""))
        db_path.parent.mkdir(exist_ok=True, parents=True)

    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def init_db(engine: Engine) -> Engine:
    """
    Cree les tables si elles n'existent pas deja.

    Returns:
        L'engine initialise (pour chainage dans le container)
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from nextflix.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(engine)
    return engine
