"""
Utilitaires partages pour les commandes CLI de CineLib.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- fail : affiche une erreur etiquetee puis termine la commande
- require_movie_file : verifie le fichier video passe en argument
"""

from contextlib import contextmanager
from pathlib import Path
from typing import NoReturn

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.markup import escape

from cinelib.services.importer import is_movie_file
from cinelib.utils.constants import MOVIE_EXTENSIONS

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("cinelib")
    try:
        yield
    finally:
        loguru_logger.enable("cinelib")


def fail(label: str, message: str, code: int = 1) -> NoReturn:
    """Affiche une erreur etiquetee (ex: "Database Error") et quitte."""
    console.print(f"[bold red]{label}:[/bold red] {escape(message)}")
    raise typer.Exit(code)


def require_movie_file(file_path: Path) -> Path:
    """Le fichier doit exister et avoir une extension video acceptee."""
    if not file_path.is_file():
        fail("No File", f"Movie file not found: {file_path}")
    if not is_movie_file(file_path):
        accepted = ", ".join(sorted(MOVIE_EXTENSIONS))
        fail("File Error", f"Unsupported movie file: {file_path.name} (accepted: {accepted})")
    return file_path
