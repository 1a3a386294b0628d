"""
Utilitaires partages pour les commandes CLI de NextFlix.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- init_container / start_engine : container initialise et collection chargee
- with_container : decorateur injectant un container initialise
- resolve_entry : retrouve une entree a partir d'un prefixe d'ID local
- render_results / render_entries : tableaux Rich
"""

from collections.abc import Sequence
from contextlib import contextmanager
from functools import wraps
from typing import Optional

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from nextflix.container import Container
from nextflix.core.entities.collection import CollectionEntry, MediaKind, UserRating
from nextflix.core.ports.api_clients import SearchResult
from nextflix.services.engine import NextFlixEngine

console = Console()

# Longueur d'ID local affichee dans les tableaux (suffisante pour lever l'ambiguite)
SHORT_ID_LENGTH = 8

RATING_ICONS = {
    UserRating.LOVE: "[magenta]♥ love[/magenta]",
    UserRating.UP: "[green]👍 up[/green]",
    UserRating.DOWN: "[red]👎 down[/red]",
}


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("nextflix")
    try:
        yield
    finally:
        loguru_logger.enable("nextflix")


def init_container(requires_db: bool = True) -> Container:
    """Cree un container et initialise la base si demande."""
    container = Container()
    if requires_db:
        container.database.init()
    return container


def start_engine(container: Container) -> NextFlixEngine:
    """
    Retourne le moteur avec la collection chargee et migree.

    Signale a l'utilisateur une collection persistee illisible.
    """
    engine = container.engine()
    engine.start()
    if engine.store.recovered_from_corrupt:
        console.print(
            "[yellow]Collection enregistree illisible en tout ou partie : "
            "une copie brute a ete conservee.[/yellow]"
        )
    return engine


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        async def my_command(container, ...):
            engine = start_engine(container)
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = init_container(requires_db)
            try:
                return await func(container, *args, **kwargs)
            finally:
                await container.search_provider().close()
        return wrapper
    return decorator


def short_id(entry: CollectionEntry) -> str:
    return entry.local_id[:SHORT_ID_LENGTH]


def resolve_entry(engine: NextFlixEngine, id_prefix: str) -> CollectionEntry:
    """
    Retrouve l'entree dont l'ID local commence par id_prefix.

    Raises:
        typer.Exit: Si aucune entree ou plusieurs entrees correspondent
    """
    prefix = id_prefix.strip().lower()
    matches = [e for e in engine.store.entries if prefix and e.local_id.startswith(prefix)]
    if not matches:
        console.print(f"[red]Aucune entree pour l'ID {id_prefix!r}[/red]")
        raise typer.Exit(1)
    if len(matches) > 1:
        console.print(
            f"[red]ID {id_prefix!r} ambigu : {len(matches)} entrees correspondent[/red]"
        )
        raise typer.Exit(1)
    return matches[0]


def _kind_label(kind: Optional[MediaKind]) -> str:
    if kind is MediaKind.SERIES:
        return "[cyan]Serie[/cyan]"
    return "[blue]Film[/blue]"


def _rating_label(rating: Optional[UserRating]) -> str:
    return RATING_ICONS[rating] if rating else "[dim]-[/dim]"


def _year(release_date: Optional[str]) -> str:
    return release_date[:4] if release_date and len(release_date) >= 4 else "-"


def render_results(
    results: Sequence[SearchResult],
    engine: Optional[NextFlixEngine] = None,
) -> None:
    """Affiche les resultats de recherche, numerotes a partir de 1."""
    table = Table(title=f"{len(results)} resultat(s)", show_header=True)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Titre", style="bold")
    table.add_column("Type")
    table.add_column("Annee", justify="right")
    table.add_column("TMDB", justify="right")
    table.add_column("Genres", style="dim")
    table.add_column("Realisation", style="dim")
    table.add_column("Collection")

    for position, result in enumerate(results, start=1):
        existing = engine.find_existing(result) if engine else None
        table.add_row(
            str(position),
            result.title,
            _kind_label(result.media_kind),
            _year(result.release_date),
            f"{result.provider_rating:.1f}" if result.provider_rating else "-",
            ", ".join(result.genres or ()),
            result.director or "",
            _rating_label(existing.user_rating) if existing else "",
        )
    console.print(table)


def render_entries(entries: Sequence[CollectionEntry], title: str) -> None:
    """Affiche des entrees de la collection."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", style="dim")
    table.add_column("Titre", style="bold")
    table.add_column("Type")
    table.add_column("Annee", justify="right")
    table.add_column("Note")
    table.add_column("TMDB", justify="right")
    table.add_column("Ajoute le")

    for entry in entries:
        table.add_row(
            short_id(entry),
            entry.title,
            _kind_label(entry.media_kind),
            _year(entry.release_date),
            _rating_label(entry.user_rating),
            f"{entry.provider_rating:.1f}" if entry.provider_rating is not None else "-",
            entry.date_added,
        )
    console.print(table)
