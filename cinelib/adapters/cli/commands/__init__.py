"""Sous-package CLI commands - re-exporte les commandes publiques."""

from cinelib.adapters.cli.commands.catalog_commands import (
    categories,
    list_movies,
    stale,
)
from cinelib.adapters.cli.commands.import_commands import (
    add,
    scrape,
)
from cinelib.adapters.cli.commands.movie_commands import (
    delete,
    edit,
    play,
    rate,
)

__all__ = [
    # consultation
    "list_movies",
    "stale",
    "categories",
    # ajout
    "add",
    "scrape",
    # modification
    "edit",
    "rate",
    "delete",
    "play",
]
