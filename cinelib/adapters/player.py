"""
Lancement du lecteur video local.
"""

import shlex
import subprocess
from pathlib import Path


class PlayerError(Exception):
    """Le lecteur n'a pas pu etre lance."""


def launch_player(command: str, file_path: Path) -> subprocess.Popen:
    """
    Lance le lecteur sur le fichier, sans attendre la fin de la lecture.

    Args:
        command: Commande du lecteur (ex: "mpv", "vlc --fullscreen")
        file_path: Fichier video a lire

    Raises:
        PlayerError: Si la commande est vide, mal formee, introuvable ou non executable
    """
    try:
        program = shlex.split(command)
    except ValueError as e:
        raise PlayerError(f"Commande du lecteur invalide '{command}': {e}") from e
    if not program:
        raise PlayerError("Aucune commande de lecteur configuree")
    args = program + [str(file_path)]
    try:
        return subprocess.Popen(
            args,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        raise PlayerError(f"Impossible de lancer '{command}': {e}") from e
