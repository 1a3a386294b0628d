"""
Commandes CLI de recherche et d'ajout a la collection.
"""

import asyncio
from enum import Enum
from typing import Annotated, Optional

import typer
from rich.prompt import Prompt

from nextflix.adapters.cli.helpers import (
    console,
    render_results,
    short_id,
    start_engine,
    suppress_loguru,
    with_container,
)
from nextflix.core.entities.collection import UserRating
from nextflix.utils.helpers import image_url


class RatingChoice(str, Enum):
    """Note saisie en ligne de commande ("none" retire la note)."""

    LOVE = "love"
    UP = "up"
    DOWN = "down"
    NONE = "none"

    def to_user_rating(self) -> Optional[UserRating]:
        if self is RatingChoice.NONE:
            return None
        return UserRating(self.value)


def search(
    query: Annotated[
        Optional[str],
        typer.Argument(help="Titre recherche (omis en mode interactif)"),
    ] = None,
    interactive: Annotated[
        bool,
        typer.Option("--interactive", "-i", help="Saisies successives avec anti-rebond"),
    ] = False,
) -> None:
    """Recherche des films et series."""
    if not interactive and not query:
        console.print("[red]Indiquer un titre ou utiliser --interactive[/red]")
        raise typer.Exit(1)
    asyncio.run(_search_async(query, interactive))


@with_container()
async def _search_async(container, query: Optional[str], interactive: bool) -> None:
    """Implementation async de la commande search."""
    engine = start_engine(container)

    if not interactive:
        with suppress_loguru():
            results = await engine.search(query)
        _show(results, engine)
        return

    debouncer = container.search_debouncer()
    console.print("[dim]Recherche interactive : ligne vide pour quitter.[/dim]")
    pending = query
    while True:
        if pending is None:
            pending = Prompt.ask("[bold cyan]Titre[/bold cyan]", default="", console=console)
        if not pending.strip():
            debouncer.cancel()
            break
        with suppress_loguru():
            results = await debouncer.submit(pending)
        if results is not None:
            _show(results, engine)
        pending = None


def _show(results, engine) -> None:
    if not results:
        console.print("[yellow]Aucun resultat.[/yellow]")
        return
    render_results(results, engine)


def add(
    query: Annotated[str, typer.Argument(help="Titre a rechercher")],
    pick: Annotated[
        int,
        typer.Option("--pick", "-p", min=1, help="Numero du resultat a ajouter"),
    ] = 1,
    rating: Annotated[
        Optional[RatingChoice],
        typer.Option("--rating", "-r", help="Note : love, up, down ou none"),
    ] = None,
) -> None:
    """Ajoute un resultat de recherche a la collection (ou met a jour sa note)."""
    asyncio.run(_add_async(query, pick, rating))


@with_container()
async def _add_async(
    container, query: str, pick: int, rating: Optional[RatingChoice]
) -> None:
    """Implementation async de la commande add."""
    engine = start_engine(container)

    with suppress_loguru():
        results = await engine.search(query)

    if not results:
        console.print(f"[yellow]Aucun resultat pour {query!r}.[/yellow]")
        raise typer.Exit(1)
    if pick > len(results):
        console.print(f"[red]Resultat {pick} inexistant ({len(results)} resultat(s)).[/red]")
        raise typer.Exit(1)

    result = results[pick - 1]
    user_rating = rating.to_user_rating() if rating else None
    existing = engine.find_existing(result)

    if existing is not None and rating is None:
        console.print(f"[yellow]{existing.title} est deja dans la collection.[/yellow]")
        return

    before = len(engine.store.entries)
    with suppress_loguru():
        entry = engine.rate_result(result, user_rating)

    if existing is not None:
        console.print(f"[green]Note mise a jour :[/green] {entry.title}")
    elif len(engine.store.entries) == before:
        console.print(f"[green]Ancienne entree rattachee :[/green] {entry.title} [dim]({short_id(entry)})[/dim]")
    else:
        console.print(f"[green]Ajoute :[/green] {entry.title} [dim]({short_id(entry)})[/dim]")
    poster = image_url(entry.poster_ref)
    if poster:
        console.print(f"[dim]Affiche : {poster}[/dim]")
