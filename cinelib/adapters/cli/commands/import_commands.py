"""Commandes CLI d'ajout de films : add (saisie manuelle) et scrape (import par lien)."""

import asyncio
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.markup import escape
from rich.status import Status
from sqlalchemy.exc import SQLAlchemyError

from cinelib.adapters.cli.helpers import console, fail, require_movie_file, suppress_loguru
from cinelib.container import Container
from cinelib.core.ports.page_fetcher import FetchError


def add(
    file_path: Annotated[Path, typer.Argument(help="Fichier video du film")],
    title: Annotated[
        Optional[str],
        typer.Option("--title", "-t", help="Titre (defaut: nom du fichier)"),
    ] = None,
    rating: Annotated[
        int,
        typer.Option("--rating", "-r", help="Note personnelle (0-10)"),
    ] = 0,
) -> None:
    """Add a movie manually."""
    require_movie_file(file_path)
    if not 0 <= rating <= 10:
        fail("Invalid Rating", "Please enter a rating between 0 and 10.")

    container = Container()
    try:
        container.database.init()
        with suppress_loguru():
            movie = container.import_service().add_manual(
                file_path, title=title, personal_rating=rating
            )
    except ValueError as e:
        fail("Invalid Input", str(e))
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to save movie: {e}")

    console.print(f"[green]Added[/green] '{escape(movie.title)}' (id {movie.id})")


def scrape(
    url: Annotated[str, typer.Argument(help="Lien de la page du film (ex: IMDb)")],
    file_path: Annotated[Path, typer.Argument(help="Fichier video du film")],
) -> None:
    """Add a movie from its web page (title, rating and genres)."""
    url = url.strip()
    if not url:
        fail("Empty Link", "Please enter an IMDb link.")
    require_movie_file(file_path)
    asyncio.run(_scrape_async(url, file_path))


async def _scrape_async(url: str, file_path: Path) -> None:
    """Implementation async de la commande scrape."""
    container = Container()
    try:
        container.database.init()
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to initialize database: {e}")

    service = container.import_service()
    fetcher = container.page_fetcher()
    try:
        with suppress_loguru(), Status("[cyan]Fetching movie page...", console=console):
            result = await service.import_from_url(url, file_path)
    except FetchError as e:
        fail("Scraping Error", f"Failed to get info from IMDb: {e}")
    except SQLAlchemyError as e:
        fail("Database Error", f"Failed to save movie: {e}")
    finally:
        await fetcher.close()

    console.print(f"[green]Success:[/green] {escape(result.summary)}")
    if result.linked_categories:
        console.print(f"  Categories: [cyan]{escape(', '.join(result.linked_categories))}[/cyan]")
