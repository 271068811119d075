"""
Journalisation de CineLib via loguru.

Deux destinations, reglees par les champs log_* de Settings :
- stderr : lignes courtes et colorees pour l'utilisateur de la CLI
- fichier JSON avec rotation : historique des imports, lectures et erreurs
  de base, limite aux modules cinelib
"""

import sys
from pathlib import Path

from loguru import logger

from cinelib.config import Settings

CONSOLE_FORMAT = "<level>{level: <8}</level> <dim>{name}</dim> | {message}"


def configure_logging(settings: Settings) -> Path:
    """
    Remplace les handlers loguru par ceux de l'application.

    Le niveau console suit settings.log_level ; le fichier recoit tout
    a partir de DEBUG.

    Returns:
        Chemin du fichier de log utilise
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=settings.log_level,
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    log_file = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        serialize=True,
        filter="cinelib",
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Journalisation configuree", log_file=str(log_file), level=settings.log_level)
    return log_file
