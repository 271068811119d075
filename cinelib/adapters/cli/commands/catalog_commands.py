"""Commandes CLI de consultation : list, stale, categories."""

from collections import Counter
from typing import Annotated, Optional

import typer
from sqlalchemy.exc import SQLAlchemyError

from cinelib.adapters.cli.display import (
    display_categories,
    display_movies,
    display_stale_warning,
)
from cinelib.adapters.cli.helpers import console, fail, suppress_loguru
from cinelib.container import Container
from cinelib.core.entities.catalog import FilterCriteria


def list_movies(
    search: Annotated[
        str,
        typer.Option("--search", "-s", help="Texte recherche dans le titre"),
    ] = "",
    min_rating: Annotated[
        float,
        typer.Option("--min-rating", "-r", min=0.0, max=10.0, help="Note IMDb minimale"),
    ] = 0.0,
    category: Annotated[
        Optional[list[str]],
        typer.Option("--category", "-c", help="Categorie acceptee (repetable, OU logique)"),
    ] = None,
    stale_check: Annotated[
        bool,
        typer.Option("--stale-check/--no-stale-check", help="Afficher les suppressions suggerees"),
    ] = True,
) -> None:
    """List the catalog, optionally filtered."""
    criteria = FilterCriteria(
        search_text=search,
        min_rating=min_rating,
        selected_categories=frozenset(category or ()),
    )

    container = Container()
    try:
        container.database.init()
        catalog = container.catalog_service()
        with suppress_loguru():
            movies = catalog.list_movies(criteria)
            report = catalog.stale_report() if stale_check else None
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to load data from database: {e}")

    display_movies(movies)
    if report is not None:
        display_stale_warning(report)


def stale() -> None:
    """Show movies suggested for deletion."""
    container = Container()
    try:
        container.database.init()
        with suppress_loguru():
            report = container.catalog_service().stale_report()
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to load movies: {e}")

    if not report:
        console.print("[green]No movie to suggest for deletion.[/green]")
        return
    display_stale_warning(report)


def categories() -> None:
    """List categories with their movie counts."""
    container = Container()
    try:
        container.database.init()
        catalog = container.catalog_service()
        with suppress_loguru():
            all_categories = catalog.list_categories()
            movies = catalog.list_movies()
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to load categories: {e}")

    counts = Counter(name for movie in movies for name in movie.categories)
    display_categories(all_categories, counts)
