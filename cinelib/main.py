"""
Point d'entrée CLI de CineLib.

Configure le logging et fournit les commandes CLI.
"""

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    add,
    categories,
    delete,
    edit,
    list_movies,
    play,
    rate,
    scrape,
    stale,
)
from .config import Settings
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="cinelib",
    help="Catalogue personnel de films",
)
container = Container()

# Consultation
app.command(name="list")(list_movies)
app.command()(stale)
app.command()(categories)

# Ajout
app.command()(add)
app.command()(scrape)

# Modification
app.command()(edit)
app.command()(rate)
app.command()(delete)
app.command()(play)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Lecteur : {config.player_command}")
    typer.echo(f"User-Agent : {config.user_agent}")
    typer.echo(f"Timeout : {config.fetch_timeout}s")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineLib v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    settings = container.config()
    configure_logging(settings)

    logger.info("Démarrage de CineLib", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
