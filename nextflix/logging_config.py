"""
Configuration du logging de NextFlix via loguru.

Deux destinations, reglees depuis Settings :
- stderr : messages courts et colores, au niveau log_level (ou surcharge -v/-q)
- fichier : tout en DEBUG, serialise en JSON, avec rotation et retention

Les appels au fournisseur de recherche et les migrations de la collection
sont journalises en DEBUG/INFO : en usage normal, ils ne vont qu'au fichier.
"""

import sys
from typing import Optional

from loguru import logger

from nextflix.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def _console_filter(record) -> bool:
    # Seuls les messages de l'application atteignent la console
    return (record["name"] or "").startswith("nextflix")


def configure_logging(settings: Settings, level: Optional[str] = None) -> None:
    """
    Installe les handlers console et fichier.

    Peut etre rappelee (ex : option -v) : les handlers precedents sont remplaces.

    Args:
        settings: Parametres de l'application (niveau, fichier, rotation, retention)
        level: Niveau console force, prioritaire sur settings.log_level
    """
    logger.remove()

    console_level = (level or settings.log_level).upper()
    logger.add(
        sys.stderr,
        level=console_level,
        format=CONSOLE_FORMAT,
        filter=_console_filter,
        colorize=True,
    )

    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        f"Logging NextFlix : console={console_level}, fichier={log_file}",
        rotation=settings.log_rotation_size,
    )
