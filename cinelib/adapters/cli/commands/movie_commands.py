"""Commandes CLI de modification d'un film : edit, rate, delete, play."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from sqlalchemy.exc import SQLAlchemyError

from cinelib.adapters.cli.helpers import console, fail, suppress_loguru
from cinelib.adapters.player import PlayerError, launch_player
from cinelib.container import Container
from cinelib.core.ports.repositories import MovieNotFoundError
from cinelib.services.catalog import InvalidRatingError, UnknownCategoryError


def edit(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="Nouveau titre"),
    ] = None,
    rating: Annotated[
        Optional[int],
        typer.Option("--rating", "-r", help="Nouvelle note personnelle (0-10)"),
    ] = None,
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Categorie a ajouter"),
    ] = None,
) -> None:
    """Edit a movie's title, personal rating or categories."""
    container = Container()
    try:
        container.database.init()
        catalog = container.catalog_service()
        with suppress_loguru():
            movie = catalog.edit_movie(movie_id, title=title, personal_rating=rating)
            if category:
                catalog.add_category(movie_id, category)
    except MovieNotFoundError:
        fail("No selection", f"No movie with id {movie_id}.")
    except InvalidRatingError:
        fail("Invalid Rating", "Please enter a rating between 0 and 10.")
    except UnknownCategoryError as e:
        fail("Unknown Category", str(e))
    except ValueError as e:
        fail("Invalid Input", str(e))
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to update movie: {e}")

    console.print(f"[green]Updated[/green] '{escape(movie.title)}'")


def rate(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    rating: Annotated[int, typer.Argument(help="Note personnelle (0-10)")],
) -> None:
    """Update a movie's personal rating."""
    container = Container()
    try:
        container.database.init()
        with suppress_loguru():
            movie = container.catalog_service().rate_movie(movie_id, rating)
    except InvalidRatingError:
        fail("Invalid Rating", "Please enter a rating between 0 and 10.")
    except MovieNotFoundError:
        fail("No selection", f"No movie with id {movie_id}.")
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to update rating: {e}")

    console.print(f"[green]Rating updated successfully.[/green] {escape(movie.title)}: {movie.personal_rating}/10")


def delete(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Ne pas demander de confirmation"),
    ] = False,
) -> None:
    """Delete a movie from the catalog (the file is kept)."""
    container = Container()
    try:
        container.database.init()
        catalog = container.catalog_service()
        with suppress_loguru():
            movie = catalog.get_movie(movie_id)
        if not yes and not typer.confirm(
            f"Are you sure you want to delete the movie: {movie.title}?"
        ):
            console.print("[yellow]Cancelled.[/yellow]")
            return
        with suppress_loguru():
            catalog.delete_movie(movie_id)
    except MovieNotFoundError:
        fail("No selection", f"No movie with id {movie_id}.")
    except SQLAlchemyError as e:
        fail("Delete Error", f"Failed to delete movie: {e}")

    console.print("[green]The movie has been deleted successfully.[/green]")


def play(
    movie_id: Annotated[int, typer.Argument(help="ID du film")],
) -> None:
    """Open a movie in the configured player and record the viewing."""
    container = Container()
    config = container.config()
    try:
        container.database.init()
        catalog = container.catalog_service()
        with suppress_loguru():
            movie = catalog.get_movie(movie_id)
            file_path = Path(movie.file_link)
            if not file_path.exists():
                fail("File Error", f"Movie file not found: {movie.file_link}")
            catalog.mark_viewed(movie_id)
        launch_player(config.player_command, file_path)
    except MovieNotFoundError:
        fail("No selection", f"No movie with id {movie_id}.")
    except PlayerError as e:
        fail("Error", f"Failed to open movie: {e}")
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to update last view: {e}")

    console.print(f"[green]Playing[/green] '{escape(movie.title)}'")
