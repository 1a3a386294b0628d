"""Sous-package CLI commands - re-exporte les commandes publiques."""

from nextflix.adapters.cli.commands.search_commands import (
    RatingChoice,
    add,
    search,
)
from nextflix.adapters.cli.commands.collection_commands import (
    SortChoice,
    content_filter,
    delete,
    list_collection,
    rate,
    stats,
)
from nextflix.adapters.cli.commands.export_commands import (
    export,
)

__all__ = [
    # recherche
    "RatingChoice",
    "search",
    "add",
    # collection
    "SortChoice",
    "rate",
    "delete",
    "list_collection",
    "stats",
    "content_filter",
    # export
    "export",
]
