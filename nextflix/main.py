"""
Point d'entrée CLI de NextFlix.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import (
    add,
    content_filter,
    delete,
    export,
    list_collection,
    rate,
    search,
    stats,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="nextflix",
    help="Journal personnel des films et series vus",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """NextFlix - Collection de films et series vus."""
    if not quiet and not verbose:
        return
    # Surcharge du niveau console configure au demarrage
    settings = container.config()
    configure_logging(settings, level="ERROR" if quiet else "DEBUG")


# Recherche et ajout
app.command()(search)
app.command()(add)

# Collection
app.command()(rate)
app.command()(delete)
# Note: "list" masquerait le builtin Python, donc on utilise name= explicitement
app.command(name="list")(list_collection)
app.command()(stats)
app.command(name="filter")(content_filter)

# Export
app.command()(export)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration NextFlix")
    mode = "TMDB" if config.tmdb_enabled else "hors-ligne (catalogue de demonstration)"
    typer.echo(f"Recherche : {mode}")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Cache API : {config.cache_dir}")
    typer.echo(f"Pages par recherche : {config.search_pages}")
    typer.echo(f"Exports : {config.export_dir}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"NextFlix v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    # Charge la configuration et configure le logging
    settings = container.config()
    configure_logging(settings)

    # Initialise la base de données (crée les tables si nécessaire)
    container.database.init()

    logger.info("Démarrage de NextFlix", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
