"""
Commande CLI d'export de la collection (CSV, JSON, TXT).
"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from nextflix.adapters.cli.helpers import (
    console,
    init_container,
    start_engine,
    suppress_loguru,
)


def export(
    directory: Annotated[
        Optional[Path],
        typer.Option("--dir", "-d", help="Repertoire de destination (defaut : configuration)"),
    ] = None,
) -> None:
    """Exporte la collection complete en CSV, JSON et TXT."""
    with suppress_loguru():
        container = init_container()
        engine = start_engine(container)

    if not engine.store.entries:
        console.print("[yellow]Aucun element a exporter.[/yellow]")
        raise typer.Exit(0)

    sink = container.export_sink(directory=directory) if directory else container.export_sink()
    written = [sink.write(payload) for payload in engine.exporter.payloads()]

    console.print(
        f"[bold cyan]Export[/bold cyan] : {len(engine.store.entries)} entree(s)"
    )
    for path in written:
        console.print(f"  [green]✓[/green] {path}")
