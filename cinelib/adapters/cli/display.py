"""
Affichage Rich du catalogue : tableau des films, categories, avertissements.
"""

from collections.abc import Iterable

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cinelib.adapters.cli.helpers import console
from cinelib.core.entities.catalog import Category, Movie
from cinelib.services.stale_detector import STALE_WARNING_TITLE, StaleReport


def format_rating(rating: float) -> str:
    return f"{rating:.1f}" if rating else "-"


def render_movie_table(movies: list[Movie], title: str = "Movies") -> Table:
    """Construit le tableau des films (id, titre, notes, categories, derniere lecture)."""
    table = Table(title=f"{title} ({len(movies)})", show_lines=False)
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("IMDb", justify="right")
    table.add_column("Personal", justify="right")
    table.add_column("Categories", style="cyan")
    table.add_column("Last view", style="dim")

    for movie in movies:
        table.add_row(
            str(movie.id) if movie.id is not None else "",
            escape(movie.title),
            format_rating(movie.imdb_rating),
            str(movie.personal_rating),
            escape(", ".join(movie.categories)),
            movie.last_view or "",
        )
    return table


def display_movies(movies: list[Movie], title: str = "Movies") -> None:
    if not movies:
        console.print("[yellow]No movie matches.[/yellow]")
        return
    console.print(render_movie_table(movies, title))


def display_categories(categories: Iterable[Category], counts: dict[str, int]) -> None:
    """Categories avec le nombre de films lies."""
    table = Table(title="Categories")
    table.add_column("ID", justify="right", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Movies", justify="right")
    for category in categories:
        table.add_row(str(category.id), escape(category.name), str(counts.get(category.name, 0)))
    console.print(table)


def display_stale_warning(report: StaleReport) -> None:
    """Avertissement "Suggested Deletions" (rien si aucun candidat)."""
    if not report:
        return
    console.print(
        Panel(
            Text(report.message),
            title=f"[bold yellow]{STALE_WARNING_TITLE}[/bold yellow]",
            border_style="yellow",
        )
    )
