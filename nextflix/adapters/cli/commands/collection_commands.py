"""
Commandes CLI de consultation et de modification de la collection.
"""

from enum import Enum
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.prompt import Confirm

from nextflix.adapters.cli.commands.search_commands import RatingChoice
from nextflix.adapters.cli.helpers import (
    console,
    init_container,
    render_entries,
    resolve_entry,
    start_engine,
    suppress_loguru,
)
from nextflix.core.value_objects.view_options import (
    RatingFilter,
    SortKey,
    TypeFilter,
    ViewOptions,
)


class SortChoice(str, Enum):
    """Ordre d'affichage de la collection."""

    ADDED = "added"
    TITLE = "title"
    YEAR = "year"
    RATING = "rating"


SORT_KEYS = {
    SortChoice.ADDED: SortKey.DATE_WATCHED,
    SortChoice.TITLE: SortKey.TITLE,
    SortChoice.YEAR: SortKey.YEAR,
    SortChoice.RATING: SortKey.RATING,
}


def rate(
    local_id: Annotated[str, typer.Argument(help="ID local (ou debut de l'ID)")],
    rating: Annotated[RatingChoice, typer.Argument(help="love, up, down ou none")],
) -> None:
    """Modifie la note d'une entree de la collection."""
    with suppress_loguru():
        engine = start_engine(init_container())
    entry = resolve_entry(engine, local_id)

    with suppress_loguru():
        engine.update_rating(entry.local_id, rating.to_user_rating())
    label = rating.value if rating is not RatingChoice.NONE else "sans note"
    console.print(f"[green]{entry.title}[/green] : {label}")


def delete(
    local_id: Annotated[str, typer.Argument(help="ID local (ou debut de l'ID)")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Supprimer sans confirmation"),
    ] = False,
) -> None:
    """Supprime une entree de la collection."""
    with suppress_loguru():
        engine = start_engine(init_container())
    entry = resolve_entry(engine, local_id)

    if not yes and not Confirm.ask(f"Supprimer [bold]{entry.title}[/bold] ?", default=False):
        console.print("[dim]Suppression annulee.[/dim]")
        raise typer.Exit(0)

    with suppress_loguru():
        engine.delete(entry.local_id)
    console.print(f"[green]Supprime :[/green] {entry.title}")


def list_collection(
    media_type: Annotated[
        TypeFilter,
        typer.Option("--type", "-t", help="Filtre par type"),
    ] = TypeFilter.ALL,
    rating: Annotated[
        RatingFilter,
        typer.Option("--rating", "-r", help="Filtre par note"),
    ] = RatingFilter.ALL,
    search_text: Annotated[
        str,
        typer.Option("--search", "-s", help="Texte (titre, resume, distribution, genres)"),
    ] = "",
    sort: Annotated[
        SortChoice,
        typer.Option("--sort", help="Ordre d'affichage"),
    ] = SortChoice.ADDED,
) -> None:
    """Affiche la collection filtree et triee."""
    with suppress_loguru():
        container = init_container()
        engine = start_engine(container)
        preferences = container.preferences()
        options = ViewOptions(
            type_filter=media_type,
            rating_filter=rating,
            search_text=search_text,
            sort_key=SORT_KEYS[sort],
            content_filter=preferences.content_filter_enabled,
        )
        entries = engine.project(options)

    total = len(engine.store.entries)
    if not entries:
        if total:
            console.print(f"[yellow]Aucune entree ne correspond ({total} au total).[/yellow]")
        else:
            console.print("[yellow]La collection est vide.[/yellow]")
        return

    if options.is_default:
        title = f"Collection : {total} entree(s)"
    else:
        title = f"Collection filtree : {len(entries)}/{total} entree(s)"
    render_entries(entries, title=title)


def stats() -> None:
    """Affiche les compteurs de la collection."""
    with suppress_loguru():
        container = init_container()
        engine = start_engine(container)
        counters = engine.stats()
        last_added = engine.store.last_added

    lines = [
        f"[bold]Total[/bold]   : {counters.total}",
        f"Films   : {counters.movies}",
        f"Series  : {counters.series}",
        "",
        f"[magenta]Adore[/magenta]   : {counters.love}",
        f"[green]Aime[/green]    : {counters.up}",
        f"[red]Pas aime[/red]: {counters.down}",
    ]
    if last_added:
        lines.extend(["", f"[dim]Dernier ajout : {last_added}[/dim]"])
    console.print(Panel("\n".join(lines), title="NextFlix", border_style="cyan"))


def _optional_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized in ("on", "true", "1"):
        return True
    if normalized in ("off", "false", "0"):
        return False
    raise typer.BadParameter("valeur attendue : on ou off")


def content_filter(
    state: Annotated[
        Optional[str],
        typer.Argument(help="on ou off (omis : affiche l'etat)"),
    ] = None,
) -> None:
    """Active, desactive ou affiche le filtre de contenu."""
    enabled = _optional_flag(state)
    with suppress_loguru():
        preferences = init_container().preferences()
        if enabled is not None:
            preferences.set_content_filter(enabled)
        current = preferences.content_filter_enabled

    label = "[green]actif[/green]" if current else "[yellow]inactif[/yellow]"
    console.print(f"Filtre de contenu : {label}")
